"""packages/core 测试配置 -- 核心层 fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path

import aiosqlite
import pytest_asyncio


@pytest_asyncio.fixture
async def core_db_path(tmp_path: Path) -> Path:
    """核心层临时数据库文件路径"""
    return tmp_path / "sqlite" / "core_test.db"


@pytest_asyncio.fixture
async def core_db() -> AsyncGenerator[aiosqlite.Connection, None]:
    """核心层已初始化的内存数据库连接"""
    from octotask.core.store.sqlite_init import init_db

    conn = await aiosqlite.connect(":memory:")
    conn.row_factory = aiosqlite.Row
    await init_db(conn)
    yield conn
    await conn.close()
