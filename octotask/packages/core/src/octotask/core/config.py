"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、示例数据开关等可配置项。
"""

import os

# 默认使用 SQLite 内存库：进程退出即丢弃全部任务
MEMORY_DB_PATH = ":memory:"


def get_db_path() -> str:
    """获取 SQLite 数据库路径（默认内存库）"""
    return os.environ.get("OCTOTASK_DB_PATH", MEMORY_DB_PATH)


def seed_sample_tasks_enabled() -> bool:
    """启动时是否写入示例任务"""
    value = os.environ.get("OCTOTASK_SEED_SAMPLE_TASKS", "true")
    return value.strip().lower() in ("1", "true", "yes", "on")

