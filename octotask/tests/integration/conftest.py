"""集成测试共享 fixture"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from octotask.client import TaskApiClient, TaskBoardView
from octotask.core.store import SqliteTaskStore


@pytest_asyncio.fixture
async def integration_app(task_store: SqliteTaskStore):
    """集成测试用 FastAPI app"""
    from octotask.gateway.main import create_app

    app = create_app()
    app.state.task_store = task_store
    yield app


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def board(client: AsyncClient) -> TaskBoardView:
    """连接到测试 app 的视图控制器"""
    return TaskBoardView(TaskApiClient(http_client=client))
