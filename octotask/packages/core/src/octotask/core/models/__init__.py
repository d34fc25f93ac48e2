"""OctoTask Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import SortDirection, SortField, TaskStatus, toggled_status
from .task import Task, TaskFields

__all__ = [
    # 枚举
    "TaskStatus",
    "SortField",
    "SortDirection",
    "toggled_status",
    # Task
    "Task",
    "TaskFields",
]
