"""OctoTask Gateway -- FastAPI 任务 API 服务"""
