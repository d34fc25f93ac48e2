"""LoggingMiddleware -- 请求级日志

每个 HTTP 请求绑定一个 request_id 到 structlog contextvars，并通过
X-Request-ID 响应头返回。调用方传入格式合法的 X-Request-ID 时沿用它，
便于把客户端日志与服务端日志串起来；否则生成新的 ULID。
"""

import re
import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")


def resolve_request_id(incoming: str | None) -> str:
    """沿用合法的入站 request_id，否则生成 ULID"""
    if incoming and _REQUEST_ID_PATTERN.fullmatch(incoming):
        return incoming
    return str(ULID())


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        log = structlog.get_logger()
        await log.ainfo("request_started")
        start_time = time.monotonic()

        try:
            response = await call_next(request)
        except Exception:
            await log.aexception(
                "request_failed",
                duration_ms=_elapsed_ms(start_time),
            )
            raise

        await log.ainfo(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start_time),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(start_time: float) -> int:
    return int((time.monotonic() - start_time) * 1000)
