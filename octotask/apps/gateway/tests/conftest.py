"""apps/gateway 测试配置 -- FastAPI app + httpx AsyncClient"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from octotask.core.store import SqliteTaskStore


@pytest_asyncio.fixture
async def app(task_store: SqliteTaskStore):
    """创建测试用 FastAPI app，手动注入 TaskStore（绕过 lifespan）"""
    from octotask.gateway.main import create_app

    application = create_app()
    application.state.task_store = task_store
    yield application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def create_task(client: AsyncClient):
    """通过 API 创建任务并断言 201"""

    async def _create(title: str = "Temp Task", **fields) -> dict:
        payload = {
            "title": title,
            "description": "Task description",
            "dueDate": "2026-03-01",
            "notes": "Task notes",
            **fields,
        }
        resp = await client.post("/api/tasks", json=payload)
        assert resp.status_code == 201
        return resp.json()

    return _create
