"""FastAPI 应用主文件

app 创建 + lifespan 管理：TaskStore 初始化/关闭 + 中间件 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from octotask.core.config import get_db_path, seed_sample_tasks_enabled
from octotask.core.store import create_task_store

from .config import load_gateway_config
from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.task_context_mw import TaskContextMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时创建 TaskStore，关闭时释放连接"""
    db_path = get_db_path()
    task_store = await create_task_store(db_path, seed=seed_sample_tasks_enabled())
    app.state.task_store = task_store
    log.info(
        "task_store_ready",
        db_path=db_path,
        total=await task_store.count_tasks(),
    )

    yield

    if getattr(app.state, "task_store", None) is not None:
        await app.state.task_store.close()


def create_app() -> FastAPI:
    """创建 FastAPI 应用实例"""
    config = load_gateway_config()

    app = FastAPI(
        title="OctoTask Gateway",
        version="0.1.0",
        description="OctoTask 任务管理 API",
        lifespan=lifespan,
    )

    # 注册中间件（最后注册的最先执行：CORS -> Logging -> TaskContext）
    app.add_middleware(TaskContextMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    setup_logging()
    setup_logfire(app)

    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(health.router, tags=["health"])

    # 前端静态文件在所有 API 路由之后挂载，确保 API 优先匹配
    if config.frontend_dir and Path(config.frontend_dir).is_dir():
        app.mount(
            "/",
            StaticFiles(directory=config.frontend_dir, html=True),
            name="frontend",
        )

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
