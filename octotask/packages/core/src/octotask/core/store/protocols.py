"""Store Protocol 接口定义

定义 TaskStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol

from ..models import SortDirection, SortField, Task, TaskFields, TaskStatus


class TaskStore(Protocol):
    """Task 存储接口"""

    async def create_task(self, fields: TaskFields) -> Task:
        """创建任务记录，分配 id 与 created_at"""
        ...

    async def get_task(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        ...

    async def list_tasks(
        self,
        status: TaskStatus | None = None,
        sort: SortField = SortField.CREATED,
        direction: SortDirection = SortDirection.DESC,
    ) -> list[Task]:
        """查询任务列表，支持按状态筛选与排序"""
        ...

    async def update_task(self, task_id: int, fields: TaskFields) -> bool:
        """全量替换可变字段，返回是否命中记录"""
        ...

    async def update_task_status(self, task_id: int, status: TaskStatus) -> bool:
        """仅更新状态，返回是否命中记录"""
        ...

    async def delete_task(self, task_id: int) -> bool:
        """硬删除任务，返回是否命中记录"""
        ...
