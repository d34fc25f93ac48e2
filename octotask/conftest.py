"""全局 pytest 配置 -- 每个测试独立的内存 TaskStore fixture"""

import os
from collections.abc import AsyncGenerator, Iterator

import pytest
import pytest_asyncio
from octotask.core.models import TaskFields
from octotask.core.store import SqliteTaskStore, create_task_store


@pytest.fixture(autouse=True)
def _test_env() -> Iterator[None]:
    """测试期间关闭示例数据，避免污染断言"""
    previous = os.environ.get("OCTOTASK_SEED_SAMPLE_TASKS")
    os.environ["OCTOTASK_SEED_SAMPLE_TASKS"] = "false"
    os.environ.setdefault("LOGFIRE_SEND_TO_LOGFIRE", "false")
    yield
    if previous is None:
        os.environ.pop("OCTOTASK_SEED_SAMPLE_TASKS", None)
    else:
        os.environ["OCTOTASK_SEED_SAMPLE_TASKS"] = previous


@pytest_asyncio.fixture
async def task_store() -> AsyncGenerator[SqliteTaskStore, None]:
    """提供全新的内存 TaskStore"""
    store = await create_task_store(":memory:")
    yield store
    await store.close()


@pytest.fixture
def make_fields():
    """构造 TaskFields 的工厂"""

    def _make(title: str = "Temp Task", **kwargs) -> TaskFields:
        return TaskFields(title=title, **kwargs)

    return _make
