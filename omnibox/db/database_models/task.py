"""Task database model."""

from dataclasses import dataclass
from typing import Optional

TASK_STATUSES = ("open", "completed")
TASK_PRIORITIES = ("low", "normal", "high")


@dataclass
class TaskDO:
    """Task data object - maps to tasks table."""

    id: str
    description: str
    status: str = "open"
    priority: str = "normal"
    contact_id: Optional[str] = None
    message_id: Optional[str] = None
    deal_id: Optional[str] = None
    due_at: Optional[str] = None
    created_at: Optional[str] = None
    completed_at: Optional[str] = None
