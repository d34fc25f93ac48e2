"""TaskStore SQLite 实现

排序规则：
- title: 忽略大小写，同名按 created_at 倒序
- dueDate: 无截止日期的任务永远排在最后，同日期按 created_at 倒序
- created: 按 created_at 指定方向
最后统一以 id 兜底，保证同一时间戳下顺序稳定。
"""

from datetime import UTC, datetime

import aiosqlite

from ..models import SortDirection, SortField, Task, TaskFields, TaskStatus

# SQLite INTEGER 为 64 位有符号整数
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def is_storable_id(task_id: int) -> bool:
    """id 是否落在 SQLite INTEGER 范围内；范围外的 id 不可能存在"""
    return SQLITE_INT_MIN <= task_id <= SQLITE_INT_MAX


def build_order_by(sort: SortField, direction: SortDirection) -> str:
    """根据排序字段与方向构造 ORDER BY 子句

    字段与方向均来自枚举，拼接进 SQL 是安全的。
    """
    sql_direction = "ASC" if direction == SortDirection.ASC else "DESC"

    if sort == SortField.TITLE:
        # NOCASE 只折叠 ASCII 字母，非 ASCII 标题按码位比较
        return (
            f"ORDER BY title COLLATE NOCASE {sql_direction}, "
            "created_at DESC, id DESC"
        )

    if sort == SortField.DUE_DATE:
        # due_date 为定宽 YYYY-MM-DD，字典序即日期序
        return (
            "ORDER BY CASE WHEN due_date IS NULL THEN 1 ELSE 0 END ASC, "
            f"due_date {sql_direction}, created_at DESC, id DESC"
        )

    return f"ORDER BY created_at {sql_direction}, id {sql_direction}"


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    @property
    def conn(self) -> aiosqlite.Connection:
        return self._conn

    async def close(self) -> None:
        await self._conn.close()

    async def create_task(self, fields: TaskFields) -> Task:
        """创建任务记录"""
        created_at = datetime.now(UTC)
        cursor = await self._conn.execute(
            """
            INSERT INTO tasks (title, description, due_date, notes, status, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                fields.title,
                fields.description,
                fields.due_date,
                fields.notes,
                fields.status.value,
                created_at.isoformat(timespec="microseconds"),
            ),
        )
        await self._conn.commit()
        return Task(id=cursor.lastrowid, created_at=created_at, **fields.model_dump())

    async def get_task(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        if not is_storable_id(task_id):
            return None
        cursor = await self._conn.execute(
            "SELECT * FROM tasks WHERE id = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def list_tasks(
        self,
        status: TaskStatus | None = None,
        sort: SortField = SortField.CREATED,
        direction: SortDirection = SortDirection.DESC,
    ) -> list[Task]:
        """查询任务列表，支持按状态筛选与排序"""
        order_by = build_order_by(sort, direction)
        if status:
            cursor = await self._conn.execute(
                f"SELECT * FROM tasks WHERE status = ? {order_by}",
                (status.value,),
            )
        else:
            cursor = await self._conn.execute(f"SELECT * FROM tasks {order_by}")
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def update_task(self, task_id: int, fields: TaskFields) -> bool:
        """全量替换可变字段（id 与 created_at 不变）"""
        if not is_storable_id(task_id):
            return False
        cursor = await self._conn.execute(
            """
            UPDATE tasks
            SET title = ?, description = ?, due_date = ?, notes = ?, status = ?
            WHERE id = ?
            """,
            (
                fields.title,
                fields.description,
                fields.due_date,
                fields.notes,
                fields.status.value,
                task_id,
            ),
        )
        await self._conn.commit()
        return cursor.rowcount > 0

    async def update_task_status(self, task_id: int, status: TaskStatus) -> bool:
        """仅更新任务状态"""
        if not is_storable_id(task_id):
            return False
        cursor = await self._conn.execute(
            "UPDATE tasks SET status = ? WHERE id = ?",
            (status.value, task_id),
        )
        await self._conn.commit()
        return cursor.rowcount > 0

    async def delete_task(self, task_id: int) -> bool:
        """硬删除任务"""
        if not is_storable_id(task_id):
            return False
        cursor = await self._conn.execute(
            "DELETE FROM tasks WHERE id = ?",
            (task_id,),
        )
        await self._conn.commit()
        return cursor.rowcount > 0

    async def count_tasks(self) -> int:
        cursor = await self._conn.execute("SELECT COUNT(*) FROM tasks")
        row = await cursor.fetchone()
        return row[0] if row else 0

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            due_date=row["due_date"],
            notes=row["notes"],
            status=row["status"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
