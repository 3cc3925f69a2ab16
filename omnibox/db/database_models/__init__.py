"""Database models (Data Objects) - map to database tables."""

from .contact import ContactDO
from .message import MessageDO, DIRECTIONS, STATUSES, TERMINAL_STATUSES, SENTIMENTS
from .task import TaskDO, TASK_STATUSES, TASK_PRIORITIES
from .deal import DealDO, DEAL_STAGES
from .call import CallLogDO
from .snapshot import DashboardSnapshot

__all__ = [
    "ContactDO",
    "MessageDO",
    "TaskDO",
    "DealDO",
    "CallLogDO",
    "DashboardSnapshot",
    "DIRECTIONS",
    "STATUSES",
    "TERMINAL_STATUSES",
    "SENTIMENTS",
    "TASK_STATUSES",
    "TASK_PRIORITIES",
    "DEAL_STAGES",
]
