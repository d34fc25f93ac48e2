"""OctoTask Core -- 任务领域模型、校验与 SQLite 存储"""
