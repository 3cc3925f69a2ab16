"""Pydantic models for API request/response."""

from .message import (
    MessageResponse,
    SendMessageRequest,
    SendMessageResponse,
    InboundMessageRequest,
    InboundMessageResponse,
)
from .task import TaskResponse, CreateTaskRequest, CompleteTaskRequest, TaskEnvelope
from .dashboard import (
    ContactResponse,
    DealResponse,
    CallLogResponse,
    SnapshotResponse,
    MetricsResponse,
    DashboardResponse,
    ThreadResponse,
    ThreadListResponse,
    ChannelInfo,
    ChannelListResponse,
)

__all__ = [
    "MessageResponse",
    "SendMessageRequest",
    "SendMessageResponse",
    "InboundMessageRequest",
    "InboundMessageResponse",
    "TaskResponse",
    "CreateTaskRequest",
    "CompleteTaskRequest",
    "TaskEnvelope",
    "ContactResponse",
    "DealResponse",
    "CallLogResponse",
    "SnapshotResponse",
    "MetricsResponse",
    "DashboardResponse",
    "ThreadResponse",
    "ThreadListResponse",
    "ChannelInfo",
    "ChannelListResponse",
]
