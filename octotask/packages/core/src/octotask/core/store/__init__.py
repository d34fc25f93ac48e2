"""OctoTask Core Store -- SQLite 存储实现

提供工厂函数创建已初始化 schema 的 TaskStore。
"""

from pathlib import Path

import aiosqlite
import structlog

from ..config import MEMORY_DB_PATH
from ..models import TaskFields, TaskStatus
from .protocols import TaskStore
from .sqlite_init import init_db
from .task_store import SqliteTaskStore, build_order_by

log = structlog.get_logger()

# 启动示例数据
SAMPLE_TASKS: list[TaskFields] = [
    TaskFields(
        title="Plan sprint tasks",
        description="Prepare task breakdown for the week",
        due_date="2026-02-22",
        notes="Align with team goals",
        status=TaskStatus.ACTIVE,
    ),
    TaskFields(
        title="Review pull request",
        description="Check coding guidelines adherence",
        due_date="2026-02-21",
        notes="",
        status=TaskStatus.DONE,
    ),
]


async def seed_sample_tasks(store: SqliteTaskStore) -> None:
    """写入示例任务"""
    for fields in SAMPLE_TASKS:
        await store.create_task(fields)
    log.info("sample_tasks_seeded", count=len(SAMPLE_TASKS))


async def create_task_store(
    db_path: str = MEMORY_DB_PATH,
    seed: bool = False,
) -> SqliteTaskStore:
    """创建 TaskStore

    Args:
        db_path: SQLite 数据库路径，":memory:" 为内存库
        seed: 是否写入示例任务

    Returns:
        SqliteTaskStore 实例
    """
    if db_path != MEMORY_DB_PATH:
        # 确保数据库目录存在
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await init_db(conn)

    store = SqliteTaskStore(conn)
    if seed:
        await seed_sample_tasks(store)
    return store


__all__ = [
    "SAMPLE_TASKS",
    "SqliteTaskStore",
    "TaskStore",
    "build_order_by",
    "create_task_store",
    "init_db",
    "seed_sample_tasks",
]
