"""TaskService -- 任务增删改查业务逻辑

校验器返回的失败结果在这里转换为 TaskValidationError，
查询不到的记录转换为 TaskNotFoundError，由路由层映射为 HTTP 状态码。
"""

from typing import Any

import structlog
from octotask.core.exceptions import TaskNotFoundError, TaskValidationError
from octotask.core.models import Task
from octotask.core.store import TaskStore
from octotask.core.validation import (
    ValidationResult,
    parse_task_id,
    validate_list_query,
    validate_status,
    validate_task_payload,
)

log = structlog.get_logger()


def _unwrap(result: ValidationResult) -> Any:
    """校验成功返回 value，失败抛出 TaskValidationError"""
    if not result.ok:
        raise TaskValidationError(result.error)
    return result.value


class TaskService:
    """任务业务服务"""

    def __init__(self, task_store: TaskStore) -> None:
        self._store = task_store

    @staticmethod
    def parse_task_id(raw: str) -> int:
        """解析路径参数中的任务 id"""
        return _unwrap(parse_task_id(raw))

    async def list_tasks(
        self,
        status: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
    ) -> list[Task]:
        """按状态筛选并排序的任务列表"""
        query = _unwrap(validate_list_query(status, sort, direction))
        return await self._store.list_tasks(query.status, query.sort, query.direction)

    async def get_task(self, task_id: int) -> Task:
        """查询单个任务"""
        task = await self._store.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(self, payload: Any) -> Task:
        """校验请求体并创建任务"""
        fields = _unwrap(validate_task_payload(payload))
        task = await self._store.create_task(fields)
        log.info("task_created", task_id=task.id, status=task.status.value)
        return task

    async def update_task(self, task_id: int, payload: Any) -> Task:
        """全量更新任务

        先检查任务是否存在，再校验请求体：不存在的 id 不论请求体是否合法都返回 404。
        """
        await self.get_task(task_id)
        fields = _unwrap(validate_task_payload(payload))
        await self._store.update_task(task_id, fields)
        log.info("task_updated", task_id=task_id, status=fields.status.value)
        return await self.get_task(task_id)

    async def update_task_status(self, task_id: int, status: Any) -> Task:
        """仅更新任务状态"""
        await self.get_task(task_id)
        new_status = _unwrap(validate_status(status))
        await self._store.update_task_status(task_id, new_status)
        log.info("task_status_updated", task_id=task_id, status=new_status.value)
        return await self.get_task(task_id)

    async def delete_task(self, task_id: int) -> int:
        """删除任务，返回被删除的 id"""
        if not await self._store.delete_task(task_id):
            raise TaskNotFoundError(task_id)
        log.info("task_deleted", task_id=task_id)
        return task_id
