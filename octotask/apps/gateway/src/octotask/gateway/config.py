"""GatewayConfig -- Gateway 运行配置

从环境变量加载，不合法的数值配置记录告警后回退默认值。
"""

import os

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()


class GatewayConfig(BaseModel):
    """Gateway 配置 -- 从环境变量加载

    环境变量:
        OCTOTASK_HOST: 监听地址（默认 127.0.0.1）
        OCTOTASK_PORT: 监听端口（默认 3030）
        OCTOTASK_CORS_ORIGINS: 允许的跨域来源，逗号分隔（默认 *）
        OCTOTASK_FRONTEND_DIR: 前端静态文件目录，存在时挂载到 /
    """

    host: str = Field(default="127.0.0.1", description="监听地址")
    port: int = Field(default=3030, ge=1, le=65535, description="监听端口")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="允许的跨域来源",
    )
    frontend_dir: str | None = Field(default=None, description="前端静态文件目录")


def load_gateway_config() -> GatewayConfig:
    """从环境变量加载 Gateway 配置

    Returns:
        GatewayConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("OCTOTASK_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("OCTOTASK_PORT"):
        try:
            port = int(val)
            if not 1 <= port <= 65535:
                raise ValueError(val)
            kwargs["port"] = port
        except ValueError:
            log.warning(
                "invalid_port_config",
                env_var="OCTOTASK_PORT",
                value=val,
                fallback=3030,
            )

    if val := os.environ.get("OCTOTASK_CORS_ORIGINS"):
        kwargs["cors_origins"] = [
            origin.strip() for origin in val.split(",") if origin.strip()
        ]

    if val := os.environ.get("OCTOTASK_FRONTEND_DIR"):
        kwargs["frontend_dir"] = val

    return GatewayConfig(**kwargs)
