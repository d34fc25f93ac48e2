"""枚举定义

包含 TaskStatus、SortField、SortDirection 三个枚举，
取值即 HTTP 查询参数与 JSON 字段中的字符串。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态：只有 active / done 两种"""

    ACTIVE = "active"
    DONE = "done"


class SortField(StrEnum):
    """列表排序字段"""

    TITLE = "title"
    CREATED = "created"
    DUE_DATE = "dueDate"


class SortDirection(StrEnum):
    """列表排序方向"""

    ASC = "asc"
    DESC = "desc"


def toggled_status(status: TaskStatus) -> TaskStatus:
    """返回另一种状态（active <-> done）"""
    return TaskStatus.DONE if status == TaskStatus.ACTIVE else TaskStatus.ACTIVE
