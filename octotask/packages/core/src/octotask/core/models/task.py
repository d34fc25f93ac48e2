"""Task Domain Model

id 与 created_at 由存储层分配，创建后不可变；
其余字段通过全量更新或状态更新修改。
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import TaskStatus


class TaskFields(BaseModel):
    """Task 可变字段 -- 校验通过后的创建/全量更新输入"""

    title: str = Field(min_length=1, description="任务标题（已去除首尾空白）")
    description: str | None = Field(default=None, description="任务描述")
    due_date: str | None = Field(default=None, description="截止日期，YYYY-MM-DD")
    notes: str | None = Field(default=None, description="备注")
    status: TaskStatus = Field(default=TaskStatus.ACTIVE, description="当前状态")


class Task(TaskFields):
    """Task 数据模型 -- JSON 线上格式使用 snake_case 字段名"""

    id: int = Field(description="唯一标识，单调递增，删除后不复用")
    created_at: datetime = Field(description="创建时间（UTC）")

    def to_wire(self) -> dict:
        """序列化为 JSON 响应体"""
        return self.model_dump(mode="json")
