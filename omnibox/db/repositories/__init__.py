"""Repository layer for data access."""

from .contact import ContactRepository
from .message import MessageRepository
from .task import TaskRepository
from .deal import DealRepository
from .call import CallRepository

__all__ = [
    "ContactRepository",
    "MessageRepository",
    "TaskRepository",
    "DealRepository",
    "CallRepository",
]
