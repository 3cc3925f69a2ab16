"""Task ledger - follow-up items created by users or suggested by the agent."""

import uuid
from typing import List, Optional

from ..db.database_models import TaskDO, TASK_PRIORITIES
from ..errors import TaskNotFound, ValidationError
from ..utils.logger import get_app_logger
from ..utils.timestamps import format_timestamp, normalize_timestamp, utc_now
from .events import EventBus
from .store import InboxStore


def task_to_dict(task: TaskDO) -> dict:
    """Event payload for a task."""
    return {
        "id": task.id,
        "description": task.description,
        "status": task.status,
        "priority": task.priority,
        "contactId": task.contact_id,
        "dueAt": task.due_at,
    }


class TaskLedger:
    """Creates and completes tasks in the store."""

    def __init__(self, store: InboxStore, events: Optional[EventBus] = None):
        self.store = store
        self.events = events
        self.logger = get_app_logger("tasks")

    async def create_task(
        self,
        description: Optional[str],
        contact_id: Optional[str] = None,
        message_id: Optional[str] = None,
        deal_id: Optional[str] = None,
        due_at: Optional[str] = None,
        priority: Optional[str] = None
    ) -> TaskDO:
        """
        Create an open task.

        Args:
            description: What needs doing (required)
            contact_id: Related contact
            message_id: Related message
            deal_id: Related deal
            due_at: ISO-8601 due date
            priority: low, normal or high; defaults to normal

        Returns:
            The created TaskDO

        Raises:
            ValidationError: If description is missing or a field is invalid
        """
        if not description or not description.strip():
            raise ValidationError("Description is required")

        priority = priority or "normal"
        if priority not in TASK_PRIORITIES:
            raise ValidationError(f"Invalid priority: {priority}")

        task = TaskDO(
            id=f"task_{uuid.uuid4().hex[:12]}",
            description=description.strip(),
            status="open",
            priority=priority,
            contact_id=contact_id,
            message_id=message_id,
            deal_id=deal_id,
            due_at=normalize_timestamp(due_at) if due_at else None,
            created_at=format_timestamp(utc_now())
        )
        self.store.tasks.create(task)

        if self.events:
            await self.events.publish("task.created", task_to_dict(task))
        return task

    async def complete_task(self, task_id: Optional[str]) -> TaskDO:
        """
        Mark a task completed. Completing a completed task is a no-op.

        Args:
            task_id: Task ID

        Returns:
            The completed TaskDO

        Raises:
            ValidationError: If task_id is missing
            TaskNotFound: If no such task exists
        """
        if not task_id:
            raise ValidationError("Task ID required")

        task = self.store.tasks.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        if task.status == "completed":
            return task

        task = self.store.tasks.update_status(task_id, "completed", format_timestamp(utc_now()))
        self.logger.info(f"Completed task {task_id}")

        if self.events:
            await self.events.publish("task.completed", task_to_dict(task))
        return task

    def list_open_tasks(self) -> List[TaskDO]:
        """Open tasks, oldest first."""
        return [task for task in self.store.tasks.list_all() if task.status == "open"]
