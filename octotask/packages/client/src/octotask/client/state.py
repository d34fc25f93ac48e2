"""View 状态与 reducer

视图的所有状态变化都通过 reduce(state, action) -> new_state 完成，
reducer 为纯函数，不做网络请求，可脱离渲染环境单独测试。
"""

from enum import StrEnum

from octotask.core.models import SortDirection, SortField, Task, TaskStatus
from pydantic import BaseModel, Field


class Tab(StrEnum):
    """视图标签页：创建/编辑表单，或按状态筛选的列表"""

    CREATE = "create"
    ACTIVE = "active"
    DONE = "done"


class Operation(StrEnum):
    """可能失败的视图操作"""

    FETCH = "fetch"
    SAVE = "save"
    STATUS = "status"
    DELETE = "delete"


# 失败时展示给用户的错误前缀
ERROR_PREFIXES: dict[Operation, str] = {
    Operation.FETCH: "Failed to fetch data: ",
    Operation.SAVE: "Error saving task: ",
    Operation.STATUS: "Error updating status: ",
    Operation.DELETE: "Error deleting task: ",
}

TITLE_REQUIRED_ERROR = "Title is required"


class SortConfig(BaseModel):
    field: SortField = SortField.CREATED
    direction: SortDirection = SortDirection.DESC


class FormData(BaseModel):
    """创建/编辑表单，字段均为原始输入字符串"""

    title: str = ""
    description: str = ""
    due_date: str = ""
    notes: str = ""


class ViewState(BaseModel):
    """视图完整状态"""

    tasks: list[Task] = Field(default_factory=list)
    loading: bool = True
    error: str | None = None
    success_message: str = ""
    active_tab: Tab = Tab.ACTIVE
    sort: SortConfig = Field(default_factory=SortConfig)
    editing_task_id: int | None = None
    editing_task_status: TaskStatus | None = None
    form: FormData = Field(default_factory=FormData)

    @property
    def is_editing(self) -> bool:
        return self.editing_task_id is not None


# ---- actions ----


class SelectTab(BaseModel):
    tab: Tab


class ToggleSort(BaseModel):
    field: SortField


class FetchStarted(BaseModel):
    pass


class FetchSucceeded(BaseModel):
    tasks: list[Task]


class EditTask(BaseModel):
    task: Task


class UpdateForm(BaseModel):
    changes: dict[str, str]


class ResetForm(BaseModel):
    pass


class SaveRejected(BaseModel):
    """提交前的本地校验失败"""

    message: str


class SaveSucceeded(BaseModel):
    edited: bool
    status: TaskStatus


class StatusChanged(BaseModel):
    task_id: int
    status: TaskStatus


class TaskDeleted(BaseModel):
    task_id: int


class RequestFailed(BaseModel):
    operation: Operation
    message: str


Action = (
    SelectTab
    | ToggleSort
    | FetchStarted
    | FetchSucceeded
    | EditTask
    | UpdateForm
    | ResetForm
    | SaveRejected
    | SaveSucceeded
    | StatusChanged
    | TaskDeleted
    | RequestFailed
)


def _reset_form(state: ViewState) -> ViewState:
    return state.model_copy(
        update={
            "editing_task_id": None,
            "editing_task_status": None,
            "form": FormData(),
        }
    )


def _toggle_sort(sort: SortConfig, field: SortField) -> SortConfig:
    """同一字段切换方向；新字段从升序开始"""
    if sort.field == field:
        direction = (
            SortDirection.DESC if sort.direction == SortDirection.ASC else SortDirection.ASC
        )
        return SortConfig(field=field, direction=direction)
    return SortConfig(field=field, direction=SortDirection.ASC)


def reduce(state: ViewState, action: Action) -> ViewState:
    """根据 action 计算新状态（不修改传入的 state）"""
    if isinstance(action, SelectTab):
        new_state = state.model_copy(
            update={
                "active_tab": action.tab,
                "success_message": "",
                "error": None,
                # 表单页不拉取列表
                "loading": action.tab != Tab.CREATE,
            }
        )
        if action.tab == Tab.CREATE:
            new_state = _reset_form(new_state)
        return new_state

    if isinstance(action, ToggleSort):
        return state.model_copy(update={"sort": _toggle_sort(state.sort, action.field)})

    if isinstance(action, FetchStarted):
        return state.model_copy(update={"loading": True})

    if isinstance(action, FetchSucceeded):
        return state.model_copy(
            update={"tasks": list(action.tasks), "error": None, "loading": False}
        )

    if isinstance(action, EditTask):
        task = action.task
        return state.model_copy(
            update={
                "active_tab": Tab.CREATE,
                "editing_task_id": task.id,
                "editing_task_status": task.status,
                "form": FormData(
                    title=task.title or "",
                    description=task.description or "",
                    due_date=task.due_date or "",
                    notes=task.notes or "",
                ),
                "success_message": "",
                "error": None,
                "loading": False,
            }
        )

    if isinstance(action, UpdateForm):
        changes = {
            key: value for key, value in action.changes.items() if key in FormData.model_fields
        }
        return state.model_copy(update={"form": state.form.model_copy(update=changes)})

    if isinstance(action, ResetForm):
        return _reset_form(state)

    if isinstance(action, SaveRejected):
        return state.model_copy(update={"error": action.message})

    if isinstance(action, SaveSucceeded):
        update: dict = {
            "success_message": (
                "Task updated successfully." if action.edited else "Task created successfully."
            ),
            "error": None,
        }
        if action.edited:
            # 编辑保存后跳转到任务所在状态的列表
            update["active_tab"] = Tab(action.status.value)
            update["loading"] = True
        return _reset_form(state.model_copy(update=update))

    if isinstance(action, StatusChanged | TaskDeleted):
        if isinstance(action, StatusChanged):
            message = f"Task moved to {action.status.value}."
        else:
            message = "Task deleted successfully."
        new_state = state.model_copy(update={"success_message": message, "error": None})
        if state.editing_task_id == action.task_id:
            new_state = _reset_form(new_state)
        return new_state

    if isinstance(action, RequestFailed):
        update = {"error": ERROR_PREFIXES[action.operation] + action.message}
        if action.operation == Operation.FETCH:
            update["loading"] = False
        return state.model_copy(update=update)

    raise TypeError(f"unknown action: {type(action).__name__}")
