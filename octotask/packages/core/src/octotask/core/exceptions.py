"""Task 异常体系

TaskValidationError -> HTTP 400，TaskNotFoundError -> HTTP 404。
"""

TASK_NOT_FOUND_MESSAGE = "Task not found"


class TaskError(Exception):
    """Task 包基础异常"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskError):
    """请求参数或请求体校验失败（缺字段、类型错误、枚举越界）"""


class TaskNotFoundError(TaskError):
    """指定 id 的任务不存在"""

    def __init__(self, task_id: int) -> None:
        """
        Args:
            task_id: 查询的任务 id
        """
        super().__init__(TASK_NOT_FOUND_MESSAGE)
        self.task_id = task_id
