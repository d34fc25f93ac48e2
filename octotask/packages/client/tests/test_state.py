"""View reducer 单元测试

测试内容：
1. 标签页切换与表单重置
2. 排序切换规则
3. 列表加载成功/失败
4. 编辑、保存、状态切换、删除后的状态
"""

import pytest
from octotask.client.state import (
    EditTask,
    FetchStarted,
    FetchSucceeded,
    FormData,
    Operation,
    RequestFailed,
    ResetForm,
    SaveRejected,
    SaveSucceeded,
    SelectTab,
    SortConfig,
    StatusChanged,
    Tab,
    TaskDeleted,
    ToggleSort,
    UpdateForm,
    ViewState,
    reduce,
)
from octotask.core.models import SortDirection, SortField, TaskStatus


@pytest.fixture
def editing_state(task_factory) -> ViewState:
    task = task_factory(
        5,
        "Edit me",
        description="d",
        due_date="2026-03-01",
        notes="n",
        status=TaskStatus.DONE,
    )
    return reduce(ViewState(), EditTask(task=task))


class TestInitialState:
    def test_defaults(self):
        state = ViewState()
        assert state.active_tab == Tab.ACTIVE
        assert state.sort == SortConfig(field=SortField.CREATED, direction=SortDirection.DESC)
        assert state.loading is True
        assert state.tasks == []
        assert state.is_editing is False


class TestSelectTab:
    def test_switch_to_done_clears_messages(self):
        state = ViewState(error="boom", success_message="ok")
        new_state = reduce(state, SelectTab(tab=Tab.DONE))
        assert new_state.active_tab == Tab.DONE
        assert new_state.error is None
        assert new_state.success_message == ""
        assert new_state.loading is True

    def test_create_tab_resets_form(self, editing_state: ViewState):
        new_state = reduce(editing_state, SelectTab(tab=Tab.CREATE))
        assert new_state.active_tab == Tab.CREATE
        assert new_state.editing_task_id is None
        assert new_state.form == FormData()
        assert new_state.loading is False

    def test_reducer_does_not_mutate_input(self):
        state = ViewState()
        reduce(state, SelectTab(tab=Tab.DONE))
        assert state.active_tab == Tab.ACTIVE


class TestToggleSort:
    def test_new_field_starts_ascending(self):
        state = reduce(ViewState(), ToggleSort(field=SortField.TITLE))
        assert state.sort == SortConfig(field=SortField.TITLE, direction=SortDirection.ASC)

    def test_same_field_flips_direction(self):
        state = reduce(ViewState(), ToggleSort(field=SortField.TITLE))
        state = reduce(state, ToggleSort(field=SortField.TITLE))
        assert state.sort.direction == SortDirection.DESC
        state = reduce(state, ToggleSort(field=SortField.TITLE))
        assert state.sort.direction == SortDirection.ASC

    def test_default_created_desc_flips_to_asc(self):
        state = reduce(ViewState(), ToggleSort(field=SortField.CREATED))
        assert state.sort == SortConfig(field=SortField.CREATED, direction=SortDirection.ASC)


class TestFetch:
    def test_success(self, task_factory):
        tasks = [task_factory(1, "a"), task_factory(2, "b")]
        state = reduce(ViewState(error="old"), FetchStarted())
        assert state.loading is True

        state = reduce(state, FetchSucceeded(tasks=tasks))
        assert state.tasks == tasks
        assert state.loading is False
        assert state.error is None

    def test_failure_keeps_view_alive(self):
        state = reduce(
            ViewState(), RequestFailed(operation=Operation.FETCH, message="Network error")
        )
        assert state.error == "Failed to fetch data: Network error"
        assert state.loading is False


class TestEditing:
    def test_edit_populates_form(self, editing_state: ViewState):
        assert editing_state.active_tab == Tab.CREATE
        assert editing_state.editing_task_id == 5
        assert editing_state.editing_task_status == TaskStatus.DONE
        assert editing_state.form == FormData(
            title="Edit me", description="d", due_date="2026-03-01", notes="n"
        )

    def test_edit_null_fields_become_empty_strings(self, task_factory):
        state = reduce(ViewState(), EditTask(task=task_factory(1, "Bare")))
        assert state.form == FormData(title="Bare")

    def test_update_form_ignores_unknown_fields(self):
        state = reduce(ViewState(), UpdateForm(changes={"title": "New", "bogus": "x"}))
        assert state.form.title == "New"
        assert not hasattr(state.form, "bogus")

    def test_reset_form(self, editing_state: ViewState):
        state = reduce(editing_state, ResetForm())
        assert state.editing_task_id is None
        assert state.editing_task_status is None
        assert state.form == FormData()

    def test_save_rejected(self):
        state = reduce(ViewState(), SaveRejected(message="Title is required"))
        assert state.error == "Title is required"


class TestSave:
    def test_create_stays_on_form(self):
        state = reduce(ViewState(), SelectTab(tab=Tab.CREATE))
        state = reduce(state, UpdateForm(changes={"title": "x"}))
        state = reduce(state, SaveSucceeded(edited=False, status=TaskStatus.ACTIVE))
        assert state.active_tab == Tab.CREATE
        assert state.success_message == "Task created successfully."
        assert state.form == FormData()

    def test_edit_switches_to_status_tab(self, editing_state: ViewState):
        state = reduce(editing_state, SaveSucceeded(edited=True, status=TaskStatus.DONE))
        assert state.active_tab == Tab.DONE
        assert state.success_message == "Task updated successfully."
        assert state.editing_task_id is None

    def test_save_failure(self):
        state = reduce(
            ViewState(), RequestFailed(operation=Operation.SAVE, message="Task title is required")
        )
        assert state.error == "Error saving task: Task title is required"


class TestRowActions:
    def test_status_changed(self):
        state = reduce(ViewState(error="x"), StatusChanged(task_id=1, status=TaskStatus.DONE))
        assert state.success_message == "Task moved to done."
        assert state.error is None

    def test_status_change_of_edited_task_resets_form(self, editing_state: ViewState):
        state = reduce(editing_state, StatusChanged(task_id=5, status=TaskStatus.ACTIVE))
        assert state.editing_task_id is None

    def test_delete_of_other_task_keeps_form(self, editing_state: ViewState):
        state = reduce(editing_state, TaskDeleted(task_id=99))
        assert state.success_message == "Task deleted successfully."
        assert state.editing_task_id == 5

    def test_delete_of_edited_task_resets_form(self, editing_state: ViewState):
        state = reduce(editing_state, TaskDeleted(task_id=5))
        assert state.editing_task_id is None

    @pytest.mark.parametrize(
        "operation,prefix",
        [
            (Operation.STATUS, "Error updating status: "),
            (Operation.DELETE, "Error deleting task: "),
        ],
    )
    def test_failures(self, operation: Operation, prefix: str):
        state = reduce(ViewState(), RequestFailed(operation=operation, message="Task not found"))
        assert state.error == prefix + "Task not found"


def test_unknown_action_rejected():
    with pytest.raises(TypeError):
        reduce(ViewState(), object())
