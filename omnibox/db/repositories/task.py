"""Task repository for database operations."""

from typing import Optional, List
from .base import BaseRepository
from ..database_models.task import TaskDO

_COLUMNS = "id, description, status, priority, contact_id, message_id, deal_id, due_at, created_at, completed_at"


def _row_to_task(row) -> TaskDO:
    return TaskDO(
        id=row[0],
        description=row[1],
        status=row[2],
        priority=row[3],
        contact_id=row[4],
        message_id=row[5],
        deal_id=row[6],
        due_at=row[7],
        created_at=row[8],
        completed_at=row[9]
    )


class TaskRepository(BaseRepository):
    """Repository for Task CRUD operations."""

    def create(self, task: TaskDO) -> TaskDO:
        """
        Create a new task record.

        Args:
            task: TaskDO instance

        Returns:
            The created task
        """
        try:
            self.conn.execute(f"""
                INSERT INTO tasks ({_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, [
                task.id,
                task.description,
                task.status,
                task.priority,
                task.contact_id,
                task.message_id,
                task.deal_id,
                task.due_at,
                task.created_at,
                task.completed_at
            ])
            self.conn.commit()
            self.logger.info(f"Created task record: {task.id}")
            return task
        except Exception as e:
            raise self._store_failure(f"create task {task.id}", e)

    def get(self, task_id: str) -> Optional[TaskDO]:
        """
        Get task by ID.

        Args:
            task_id: Task ID

        Returns:
            TaskDO instance or None
        """
        try:
            result = self.conn.execute(f"""
                SELECT {_COLUMNS}
                FROM tasks
                WHERE id = ?
            """, [task_id]).fetchone()
            return _row_to_task(result) if result else None
        except Exception as e:
            raise self._store_failure(f"get task {task_id}", e)

    def update_status(self, task_id: str, status: str, completed_at: Optional[str]) -> Optional[TaskDO]:
        """
        Update the status of a task.

        Args:
            task_id: Task ID
            status: New status
            completed_at: Completion timestamp, None when reopening

        Returns:
            The updated task, or None if it does not exist
        """
        try:
            self.conn.execute("""
                UPDATE tasks SET status = ?, completed_at = ?
                WHERE id = ?
            """, [status, completed_at, task_id])
            self.conn.commit()
        except Exception as e:
            raise self._store_failure(f"update task {task_id}", e)
        return self.get(task_id)

    def list_all(self) -> List[TaskDO]:
        """
        List all tasks.

        Returns:
            List of TaskDO instances, oldest first
        """
        try:
            results = self.conn.execute(f"""
                SELECT {_COLUMNS}
                FROM tasks
                ORDER BY created_at, id
            """).fetchall()
            return [_row_to_task(row) for row in results]
        except Exception as e:
            raise self._store_failure("list tasks", e)
