"""CLI 入口模块 -- python -m octotask.gateway

使用 GatewayConfig 中的 host/port 启动 uvicorn。
"""

import uvicorn

from .config import load_gateway_config


def main() -> None:
    """CLI 主入口"""
    config = load_gateway_config()
    uvicorn.run(
        "octotask.gateway.main:app",
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
