"""TaskBoardView -- 单视图控制器

持有 ViewState，把用户操作翻译为 API 调用与 reducer action。
所有网络失败都转换为可见的错误信息并记录日志，不会向调用方抛出。
"""

import structlog
from octotask.core.models import SortField, Task, TaskStatus, toggled_status

from .api import TaskApiClient
from .exceptions import TaskApiError
from .state import (
    TITLE_REQUIRED_ERROR,
    Action,
    EditTask,
    FetchStarted,
    FetchSucceeded,
    Operation,
    RequestFailed,
    ResetForm,
    SaveRejected,
    SaveSucceeded,
    SelectTab,
    StatusChanged,
    Tab,
    TaskDeleted,
    ToggleSort,
    UpdateForm,
    ViewState,
    reduce,
)

log = structlog.get_logger()


class TaskBoardView:
    """任务看板视图：Create / Active / Done 三个标签页"""

    def __init__(self, api: TaskApiClient, state: ViewState | None = None) -> None:
        self._api = api
        self._state = state or ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, action: Action) -> ViewState:
        self._state = reduce(self._state, action)
        return self._state

    def _fail(self, operation: Operation, error: TaskApiError) -> None:
        log.error(
            "task_view_request_failed",
            operation=operation.value,
            error=error.message,
            status_code=error.status_code,
        )
        self.dispatch(RequestFailed(operation=operation, message=error.message))

    async def load(self) -> ViewState:
        """首次加载：拉取当前标签页的列表"""
        if self._state.active_tab == Tab.CREATE:
            return self.dispatch(SelectTab(tab=Tab.CREATE))
        await self.refresh()
        return self._state

    async def refresh(self, tab: Tab | None = None) -> None:
        """拉取指定（默认当前）标签页的任务列表，表单页不拉取"""
        tab = tab or self._state.active_tab
        if tab == Tab.CREATE:
            return

        self.dispatch(FetchStarted())
        try:
            tasks = await self._api.list_tasks(
                status=TaskStatus(tab.value),
                sort=self._state.sort.field,
                direction=self._state.sort.direction,
            )
        except TaskApiError as e:
            self._fail(Operation.FETCH, e)
            return
        self.dispatch(FetchSucceeded(tasks=tasks))

    async def select_tab(self, tab: Tab) -> None:
        self.dispatch(SelectTab(tab=tab))
        await self.refresh()

    async def toggle_sort(self, field: SortField) -> None:
        self.dispatch(ToggleSort(field=field))
        await self.refresh()

    def edit_task(self, task: Task) -> None:
        """点击列表行：用该任务填充表单并切换到表单页"""
        self.dispatch(EditTask(task=task))

    def update_form(self, **changes: str) -> None:
        self.dispatch(UpdateForm(changes=changes))

    def cancel_edit(self) -> None:
        self.dispatch(ResetForm())

    async def submit(self) -> None:
        """提交表单：新建走 POST，编辑走 PUT 并保留原状态"""
        form = self._state.form
        if not form.title.strip():
            self.dispatch(SaveRejected(message=TITLE_REQUIRED_ERROR))
            return

        editing_id = self._state.editing_task_id
        if editing_id is None:
            status = TaskStatus.ACTIVE
        else:
            status = self._state.editing_task_status or TaskStatus.ACTIVE
        payload = {
            "title": form.title.strip(),
            "description": form.description,
            "dueDate": form.due_date or None,
            "notes": form.notes,
            "status": status.value,
        }

        try:
            if editing_id is None:
                await self._api.create_task(payload)
            else:
                await self._api.update_task(editing_id, payload)
        except TaskApiError as e:
            self._fail(Operation.SAVE, e)
            return

        self.dispatch(SaveSucceeded(edited=editing_id is not None, status=status))
        if editing_id is not None:
            await self.refresh(Tab(status.value))

    async def change_status(self, task: Task) -> None:
        """状态切换按钮：active <-> done，完成后刷新当前列表"""
        target = toggled_status(task.status)
        try:
            await self._api.update_task_status(task.id, target)
        except TaskApiError as e:
            self._fail(Operation.STATUS, e)
            return

        self.dispatch(StatusChanged(task_id=task.id, status=target))
        await self.refresh()

    async def delete_task(self, task_id: int) -> None:
        try:
            await self._api.delete_task(task_id)
        except TaskApiError as e:
            self._fail(Operation.DELETE, e)
            return

        self.dispatch(TaskDeleted(task_id=task_id))
        await self.refresh()
