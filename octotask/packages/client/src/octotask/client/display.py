"""展示辅助函数 -- 日期格式、排序箭头、空列表提示"""

from datetime import datetime

from octotask.core.models import SortDirection, SortField, TaskStatus

from .state import SortConfig, Tab


def format_date_eu(date_text: str | None) -> str:
    """将日期/时间字符串格式化为 DD.MM.YYYY，缺失或无法解析时返回 "-"

    支持 YYYY-MM-DD、ISO 8601 时间戳以及 "YYYY-MM-DD HH:MM:SS"。
    """
    if not date_text or not isinstance(date_text, str):
        return "-"

    normalized = date_text.strip().replace(" ", "T", 1)
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return "-"
    return parsed.strftime("%d.%m.%Y")


def sort_arrow(sort: SortConfig, field: SortField) -> str:
    """列头排序指示：未选中 ↕，升序 ↑，降序 ↓"""
    if sort.field != field:
        return "↕"
    return "↑" if sort.direction == SortDirection.ASC else "↓"


def status_action_label(status: TaskStatus) -> str:
    """状态切换按钮文案"""
    return "Mark done" if status == TaskStatus.ACTIVE else "Mark active"


def empty_list_message(tab: Tab) -> str:
    return "No active tasks found." if tab == Tab.ACTIVE else "No done tasks found."


def list_heading(tab: Tab) -> str:
    return "Active Tasks" if tab == Tab.ACTIVE else "Done Tasks"
