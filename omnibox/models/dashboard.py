"""Dashboard, thread and channel API models."""

from typing import Dict, List, Optional
from pydantic import Field

from .base import ApiModel
from .message import MessageResponse
from .task import TaskResponse


class ContactResponse(ApiModel):
    """A contact."""

    id: str
    name: str
    handle: str
    channel: str
    email: Optional[str] = None
    phone: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None


class DealResponse(ApiModel):
    """A pipeline deal."""

    id: str
    contact_id: str
    title: str
    value: float
    probability: float
    stage: str
    next_step: Optional[str] = None


class CallLogResponse(ApiModel):
    """A summarized call recording."""

    id: str
    contact_id: str
    recorded_at: str
    duration_seconds: int
    summary: str
    follow_ups: List[str] = Field(default_factory=list)


class SnapshotResponse(ApiModel):
    """Every store collection at one point in time."""

    contacts: List[ContactResponse]
    messages: List[MessageResponse]
    calls: List[CallLogResponse]
    deals: List[DealResponse]
    tasks: List[TaskResponse]


class MetricsResponse(ApiModel):
    """Dashboard statistics."""

    open_conversations: int = Field(description="Threads whose latest status is not resolved or closed")
    avg_first_response_minutes: float = Field(description="Mean minutes to first reply over answered threads")
    sentiment_breakdown: Dict[str, int] = Field(description="Message counts per sentiment")
    tasks_due_soon: List[TaskResponse] = Field(description="Open tasks due within the window, soonest first")


class DashboardResponse(ApiModel):
    """Response model for the dashboard."""

    snapshot: SnapshotResponse
    metrics: MetricsResponse


class ThreadResponse(ApiModel):
    """A conversation thread."""

    thread_id: str
    channel: str
    contact: ContactResponse
    messages: List[MessageResponse]
    last_message_at: str
    status: str


class ThreadListResponse(ApiModel):
    """Response model for listing threads."""

    threads: List[ThreadResponse]
    total: int


class ChannelInfo(ApiModel):
    """A registered channel adapter."""

    channel: str
    name: str
    description: Optional[str] = None
    configured: bool


class ChannelListResponse(ApiModel):
    """Response model for listing channels."""

    channels: List[ChannelInfo]
