"""OctoTask Client -- Task API 客户端与视图控制器

packages/client 的公开接口导出。
"""

from .api import TaskApiClient
from .display import (
    empty_list_message,
    format_date_eu,
    list_heading,
    sort_arrow,
    status_action_label,
)
from .exceptions import TaskApiError
from .state import (
    FormData,
    Operation,
    SortConfig,
    Tab,
    ViewState,
    reduce,
)
from .view import TaskBoardView

__all__ = [
    "TaskApiClient",
    "TaskApiError",
    "TaskBoardView",
    "ViewState",
    "SortConfig",
    "FormData",
    "Tab",
    "Operation",
    "reduce",
    "format_date_eu",
    "sort_arrow",
    "status_action_label",
    "empty_list_message",
    "list_heading",
]
