"""REST and WebSocket routes."""

from . import channels, dashboard, dependencies, messages, tasks, websocket
from .errors import register_exception_handlers

__all__ = [
    "channels",
    "dashboard",
    "dependencies",
    "messages",
    "tasks",
    "websocket",
    "register_exception_handlers",
]
