"""健康检查路由

GET /health: Liveness 检查，永远返回 200。
GET /ready: Readiness 检查，验证 SQLite 连通性。
"""

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

log = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- 验证任务存储可用

    检查项：
    1. sqlite: 数据库连通性（失败时不暴露异常细节）
    2. task_count: 当前任务数量
    """
    checks: dict = {}
    all_ok = True

    try:
        task_store = request.app.state.task_store
        checks["task_count"] = await task_store.count_tasks()
        checks["sqlite"] = "ok"
    except Exception as e:
        log.warning("readiness_sqlite_failed", error=str(e))
        checks["sqlite"] = "unavailable"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
