"""任务 CRUD 路由

GET    /api/tasks: 任务列表，支持 status 筛选与 sort/direction 排序。
GET    /api/tasks/{task_id}: 任务详情。
POST   /api/tasks: 创建任务。
PUT    /api/tasks/{task_id}: 全量更新任务。
PATCH  /api/tasks/{task_id}/status: 仅更新状态。
DELETE /api/tasks/{task_id}: 删除任务。

错误响应统一为 {"error": "<message>"}；未预期异常只记录日志，不向客户端泄露细节。
"""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, Query, Request
from octotask.core.exceptions import TaskNotFoundError, TaskValidationError
from starlette.responses import JSONResponse, RedirectResponse

from ..deps import get_task_service
from ..services.task_service import TaskService

log = structlog.get_logger()

router = APIRouter()

TASK_DELETED_MESSAGE = "Task deleted successfully"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _read_json_body(request: Request) -> Any:
    """读取 JSON 请求体；空体或非法 JSON 按空对象处理，交由字段校验报错"""
    try:
        return await request.json()
    except ValueError:
        return {}


@router.get("/api/tasks")
async def list_tasks(
    status: str | None = Query(default=None, description="按状态筛选：active / done"),
    sort: str | None = Query(default=None, description="排序字段：title / created / dueDate"),
    direction: str | None = Query(default=None, description="排序方向：asc / desc"),
    service: TaskService = Depends(get_task_service),
):
    """查询任务列表，默认按 created_at 倒序"""
    try:
        tasks = await service.list_tasks(status, sort, direction)
    except TaskValidationError as e:
        return _error(400, e.message)
    except Exception:
        log.exception("list_tasks_failed")
        return _error(500, "Failed to fetch tasks")

    return [task.to_wire() for task in tasks]


@router.get("/api/tasks/{task_id}")
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """查询单个任务"""
    try:
        task = await service.get_task(service.parse_task_id(task_id))
    except TaskValidationError as e:
        return _error(400, e.message)
    except TaskNotFoundError as e:
        return _error(404, e.message)
    except Exception:
        log.exception("get_task_failed", raw_task_id=task_id)
        return _error(500, "Failed to fetch task")

    return task.to_wire()


@router.post("/api/tasks")
async def create_task(
    request: Request,
    service: TaskService = Depends(get_task_service),
):
    """创建任务

    - 成功返回 201 + 完整记录
    - 标题缺失、dueDate 类型错误、status 越界返回 400
    """
    payload = await _read_json_body(request)
    try:
        task = await service.create_task(payload)
    except TaskValidationError as e:
        return _error(400, e.message)
    except Exception:
        log.exception("create_task_failed")
        return _error(500, "Failed to create task")

    return JSONResponse(status_code=201, content=task.to_wire())


@router.put("/api/tasks/{task_id}")
async def update_task(
    task_id: str,
    request: Request,
    service: TaskService = Depends(get_task_service),
):
    """全量更新任务（不存在的任务优先返回 404）"""
    payload = await _read_json_body(request)
    try:
        task = await service.update_task(service.parse_task_id(task_id), payload)
    except TaskValidationError as e:
        return _error(400, e.message)
    except TaskNotFoundError as e:
        return _error(404, e.message)
    except Exception:
        log.exception("update_task_failed", raw_task_id=task_id)
        return _error(500, "Failed to update task")

    return task.to_wire()


@router.patch("/api/tasks/{task_id}/status")
async def update_task_status(
    task_id: str,
    request: Request,
    service: TaskService = Depends(get_task_service),
):
    """仅更新任务状态，请求体 {"status": "active" | "done"}"""
    payload = await _read_json_body(request)
    status = payload.get("status") if isinstance(payload, dict) else None
    try:
        task = await service.update_task_status(service.parse_task_id(task_id), status)
    except TaskValidationError as e:
        return _error(400, e.message)
    except TaskNotFoundError as e:
        return _error(404, e.message)
    except Exception:
        log.exception("update_task_status_failed", raw_task_id=task_id)
        return _error(500, "Failed to update task status")

    return task.to_wire()


@router.delete("/api/tasks/{task_id}")
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """删除任务，返回 {"message", "id"}"""
    try:
        deleted_id = await service.delete_task(service.parse_task_id(task_id))
    except TaskValidationError as e:
        return _error(400, e.message)
    except TaskNotFoundError as e:
        return _error(404, e.message)
    except Exception:
        log.exception("delete_task_failed", raw_task_id=task_id)
        return _error(500, "Failed to delete task")

    return {"message": TASK_DELETED_MESSAGE, "id": deleted_id}


@router.get("/api/items", include_in_schema=False)
async def legacy_items():
    """旧路径，重定向到任务列表"""
    return RedirectResponse(url="/api/tasks")
