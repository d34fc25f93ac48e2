"""structlog 配置

日志统一经由标准库 logging 输出（ProcessorFormatter），
uvicorn 等第三方库的日志与应用日志使用同一种渲染。

- OCTOTASK_LOG_FORMAT: "dev"（默认，控制台可读格式）或 "json"
- OCTOTASK_LOG_LEVEL: 日志级别名，非法值回退 INFO
- LOGFIRE_SEND_TO_LOGFIRE: "true" 时启用 Logfire（需安装 logfire extra）
"""

import logging
import os

import structlog
from fastapi import FastAPI

LOG_FORMATS = ("dev", "json")

# LoggingMiddleware 已记录每个请求，关闭 uvicorn 自带的访问日志
_QUIET_LOGGERS = ("uvicorn.access",)


def resolve_log_level(name: str | None) -> int:
    """日志级别名 → logging 数值级别"""
    if not name:
        return logging.INFO
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.INFO)


def _renderer_for(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """初始化 structlog 与根 logger

    参数为空时读取 OCTOTASK_LOG_FORMAT / OCTOTASK_LOG_LEVEL 环境变量。
    """
    log_format = (log_format or os.environ.get("OCTOTASK_LOG_FORMAT", "dev")).lower()
    if log_format not in LOG_FORMATS:
        log_format = "dev"
    level = resolve_log_level(log_level or os.environ.get("OCTOTASK_LOG_LEVEL"))

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_format == "json":
        # JSON 输出中异常栈为字符串字段；dev 模式交给 ConsoleRenderer 渲染
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer_for(log_format),
            foreign_pre_chain=pre_chain,
        )
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logfire(app: FastAPI) -> bool:
    """按 LOGFIRE_SEND_TO_LOGFIRE 可选启用 Logfire，返回是否启用成功"""
    if os.environ.get("LOGFIRE_SEND_TO_LOGFIRE", "false").lower() != "true":
        return False
    try:
        import logfire

        logfire.configure()
        logfire.instrument_fastapi(app)
    except Exception as e:
        structlog.get_logger().warning(
            "logfire_init_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        return False
    return True
