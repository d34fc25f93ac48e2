"""TaskContextMiddleware -- 为单任务操作绑定 task_id

从 /api/tasks/{task_id}[/status] 路径中提取 task_id，
绑定到 structlog contextvars，贯穿该请求的所有日志。
"""

import structlog
from octotask.core.validation import parse_task_id
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def extract_task_id(path: str) -> int | None:
    """从请求路径提取数字 task_id，非单任务路径返回 None"""
    parts = [part for part in path.split("/") if part]
    # ["api", "tasks", "<id>", ...]
    if len(parts) >= 3 and parts[0] == "api" and parts[1] == "tasks":
        result = parse_task_id(parts[2])
        if result.ok:
            return result.value
    return None


class TaskContextMiddleware(BaseHTTPMiddleware):
    """任务级上下文中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        task_id = extract_task_id(request.url.path)
        if task_id is not None:
            structlog.contextvars.bind_contextvars(task_id=task_id)

        return await call_next(request)
