"""请求校验 -- API 边界上的显式校验器

所有校验函数都返回 ValidationResult（ok / error / value），不抛异常；
由调用方（TaskService）决定如何把失败结果转换为 TaskValidationError。
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .models import SortDirection, SortField, TaskFields, TaskStatus

TITLE_REQUIRED_MESSAGE = "Task title is required"
DUE_DATE_INVALID_MESSAGE = "Due date must be a string in YYYY-MM-DD format or null"
STATUS_INVALID_MESSAGE = "Status must be active or done"
DIRECTION_INVALID_MESSAGE = "Direction must be asc or desc"
TASK_ID_INVALID_MESSAGE = "Valid task ID is required"

_TASK_ID_PATTERN = re.compile(r"-?[0-9]+")


class ValidationResult(BaseModel):
    """带标签的校验结果"""

    ok: bool
    error: str | None = None
    value: Any = None

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(ok=False, error=message)


class ListQuery(BaseModel):
    """列表查询参数（已规范化）"""

    status: TaskStatus | None = None
    sort: SortField = SortField.CREATED
    direction: SortDirection = SortDirection.DESC


def _clean_optional_text(value: Any) -> str | None:
    """可选文本字段：非字符串视为 null，字符串去除首尾空白"""
    if not isinstance(value, str):
        return None
    return value.strip()


def validate_status(value: Any) -> ValidationResult:
    """校验状态值是否属于 active / done"""
    if isinstance(value, str) and value in TaskStatus:
        return ValidationResult.success(TaskStatus(value))
    return ValidationResult.failure(STATUS_INVALID_MESSAGE)


def validate_task_payload(body: Any) -> ValidationResult:
    """校验创建/全量更新请求体

    请求体字段使用 camelCase（dueDate）；缺省的 description / dueDate / notes
    置为 null，缺省的 status 置为 active。非 JSON 对象按空对象处理。

    Returns:
        成功时 value 为 TaskFields
    """
    if not isinstance(body, Mapping):
        body = {}

    title = body.get("title")
    if not isinstance(title, str) or not title.strip():
        return ValidationResult.failure(TITLE_REQUIRED_MESSAGE)

    due_date = body.get("dueDate")
    if due_date is not None and not isinstance(due_date, str):
        return ValidationResult.failure(DUE_DATE_INVALID_MESSAGE)

    status = TaskStatus.ACTIVE
    if "status" in body:
        status_result = validate_status(body["status"])
        if not status_result.ok:
            return status_result
        status = status_result.value

    return ValidationResult.success(
        TaskFields(
            title=title.strip(),
            description=_clean_optional_text(body.get("description")),
            # 空串与纯空白视为未设置截止日期
            due_date=(due_date.strip() or None) if due_date else None,
            notes=_clean_optional_text(body.get("notes")),
            status=status,
        )
    )


def validate_list_query(
    status: str | None = None,
    sort: str | None = None,
    direction: str | None = None,
) -> ValidationResult:
    """校验列表查询参数

    空字符串等同于未提供。未识别的 sort 回退为 created 倒序（忽略 direction）。

    Returns:
        成功时 value 为 ListQuery
    """
    query = ListQuery()

    if status:
        status_result = validate_status(status)
        if not status_result.ok:
            return status_result
        query.status = status_result.value

    if direction and direction not in SortDirection:
        return ValidationResult.failure(DIRECTION_INVALID_MESSAGE)

    if sort and sort in SortField:
        query.sort = SortField(sort)
        if direction:
            query.direction = SortDirection(direction)

    return ValidationResult.success(query)


def parse_task_id(raw: Any) -> ValidationResult:
    """解析路径中的任务 id

    只接受 ASCII 十进制数字（可带负号），拒绝 "+5"、"1_000"、全角数字等 int() 能解析的写法。
    超出 SQLite INTEGER 范围的 id 仍视为合法格式，由存储层按"不存在"处理。
    """
    text = str(raw).strip()
    if not _TASK_ID_PATTERN.fullmatch(text):
        return ValidationResult.failure(TASK_ID_INVALID_MESSAGE)
    return ValidationResult.success(int(text))
