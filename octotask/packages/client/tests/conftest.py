"""packages/client 测试 fixtures"""

from datetime import UTC, datetime

import pytest
from octotask.client import TaskApiError
from octotask.core.models import Task, TaskStatus


def make_task(task_id: int = 1, title: str = "Task", **kwargs) -> Task:
    kwargs.setdefault("created_at", datetime(2026, 2, 20, 9, 30, tzinfo=UTC))
    return Task(id=task_id, title=title, **kwargs)


class FakeTaskApi:
    """记录调用的内存版 TaskApiClient"""

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self.calls: list[tuple] = []
        self.fail_with: TaskApiError | None = None
        self._next_id = 1

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def add(self, title: str, status: TaskStatus = TaskStatus.ACTIVE, **kwargs) -> Task:
        task = make_task(self._next_id, title, status=status, **kwargs)
        self.tasks[task.id] = task
        self._next_id += 1
        return task

    async def list_tasks(self, status=None, sort=None, direction=None) -> list[Task]:
        self.calls.append(("list", status, sort, direction))
        self._maybe_fail()
        return [t for t in self.tasks.values() if status is None or t.status == status]

    async def create_task(self, payload: dict) -> Task:
        self.calls.append(("create", payload))
        self._maybe_fail()
        return self.add(payload["title"], TaskStatus(payload["status"]))

    async def update_task(self, task_id: int, payload: dict) -> Task:
        self.calls.append(("update", task_id, payload))
        self._maybe_fail()
        task = self.tasks[task_id].model_copy(
            update={"title": payload["title"], "status": TaskStatus(payload["status"])}
        )
        self.tasks[task_id] = task
        return task

    async def update_task_status(self, task_id: int, status) -> Task:
        self.calls.append(("status", task_id, status))
        self._maybe_fail()
        task = self.tasks[task_id].model_copy(update={"status": TaskStatus(status)})
        self.tasks[task_id] = task
        return task

    async def delete_task(self, task_id: int) -> int:
        self.calls.append(("delete", task_id))
        self._maybe_fail()
        del self.tasks[task_id]
        return task_id


@pytest.fixture
def fake_api() -> FakeTaskApi:
    return FakeTaskApi()


@pytest.fixture
def task_factory():
    return make_task
