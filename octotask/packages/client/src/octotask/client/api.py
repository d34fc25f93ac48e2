"""TaskApiClient -- Task REST API 调用封装

基于 httpx.AsyncClient；非 2xx 响应、网络错误与无法解析的响应统一转换为 TaskApiError。
"""

from collections.abc import Callable
from typing import Any

import httpx
import structlog
from octotask.core.models import SortDirection, SortField, Task, TaskStatus

from .exceptions import TaskApiError

log = structlog.get_logger()

DEFAULT_BASE_URL = "http://127.0.0.1:3030"
DEFAULT_TIMEOUT_S = 10.0
INVALID_RESPONSE_MESSAGE = "Invalid response from server"


def _parse_task_list(data: Any) -> list[Task]:
    if not isinstance(data, list):
        raise TypeError(f"expected a list of tasks, got {type(data).__name__}")
    return [Task.model_validate(item) for item in data]


class TaskApiClient:
    """Task API 客户端

    可传入已有的 httpx.AsyncClient（例如测试中的 ASGITransport 客户端），
    此时由调用方负责关闭。
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_s,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], Any] | None = None,
        **kwargs,
    ) -> Any:
        """发送请求，解析 JSON 响应体并用 parse 转换为结果

        Raises:
            TaskApiError: 网络错误、非 2xx 响应或无法解析的 2xx 响应
        """
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log.warning(
                "task_api_unreachable",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TaskApiError(f"Network error: {e}") from e

        if resp.is_error:
            raise TaskApiError(self._error_message(resp), status_code=resp.status_code)
        try:
            data = resp.json()
            return parse(data) if parse else data
        except (ValueError, TypeError, KeyError) as e:
            raise self._invalid_response(method, path, resp, e) from e

    @staticmethod
    def _invalid_response(
        method: str, path: str, resp: httpx.Response, error: Exception
    ) -> TaskApiError:
        log.warning(
            "task_api_invalid_response",
            method=method,
            path=path,
            status_code=resp.status_code,
            error_type=type(error).__name__,
        )
        return TaskApiError(INVALID_RESPONSE_MESSAGE, status_code=resp.status_code)

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        """提取服务端 {"error": "..."} 中的错误信息"""
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), str):
            return payload["error"]
        return f"Request failed with status {resp.status_code}"

    async def list_tasks(
        self,
        status: TaskStatus | str | None = None,
        sort: SortField | str | None = None,
        direction: SortDirection | str | None = None,
    ) -> list[Task]:
        """GET /api/tasks"""
        params = {
            key: value
            for key, value in (("status", status), ("sort", sort), ("direction", direction))
            if value is not None
        }
        return await self._request("GET", "/api/tasks", parse=_parse_task_list, params=params)

    async def get_task(self, task_id: int) -> Task:
        """GET /api/tasks/{task_id}"""
        return await self._request("GET", f"/api/tasks/{task_id}", parse=Task.model_validate)

    async def create_task(self, payload: dict[str, Any]) -> Task:
        """POST /api/tasks"""
        return await self._request(
            "POST", "/api/tasks", parse=Task.model_validate, json=payload
        )

    async def update_task(self, task_id: int, payload: dict[str, Any]) -> Task:
        """PUT /api/tasks/{task_id}"""
        return await self._request(
            "PUT", f"/api/tasks/{task_id}", parse=Task.model_validate, json=payload
        )

    async def update_task_status(self, task_id: int, status: TaskStatus | str) -> Task:
        """PATCH /api/tasks/{task_id}/status"""
        return await self._request(
            "PATCH",
            f"/api/tasks/{task_id}/status",
            parse=Task.model_validate,
            json={"status": str(status)},
        )

    async def delete_task(self, task_id: int) -> int:
        """DELETE /api/tasks/{task_id}，返回被删除的 id"""
        return await self._request(
            "DELETE", f"/api/tasks/{task_id}", parse=lambda data: int(data["id"])
        )
