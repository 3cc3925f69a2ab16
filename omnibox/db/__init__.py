"""Database package - connection, models, and repositories."""

from .connection import DatabaseConnection
from .repositories import (
    ContactRepository,
    MessageRepository,
    TaskRepository,
    DealRepository,
    CallRepository,
)

__all__ = [
    "DatabaseConnection",
    "ContactRepository",
    "MessageRepository",
    "TaskRepository",
    "DealRepository",
    "CallRepository",
]
