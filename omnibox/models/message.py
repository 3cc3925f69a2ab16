"""Message API models."""

from typing import List, Optional
from pydantic import Field

from .base import ApiModel


class MessageResponse(ApiModel):
    """A message from the log."""

    id: str = Field(description="Message ID")
    channel: str = Field(description="Channel the message was sent or received on")
    contact_id: str = Field(description="Contact ID")
    thread_id: str = Field(description="Thread ID")
    direction: str = Field(description="inbound or outbound")
    body: str = Field(description="Message text")
    status: str = Field(description="new, pending, responded, resolved or closed")
    sentiment: str = Field(description="positive, neutral or negative")
    created_at: str = Field(description="Canonical UTC ISO-8601 timestamp")


class SendMessageRequest(ApiModel):
    """Request model for replying to a thread.

    Fields are optional here so that missing input is reported by the
    pipeline as a 400 with a readable message.
    """

    channel: Optional[str] = Field(None, description="Channel to reply on")
    contact_id: Optional[str] = Field(None, description="Recipient contact ID")
    thread_id: Optional[str] = Field(None, description="Thread being answered")
    body: Optional[str] = Field(None, description="Reply text; drafted by the agent when omitted")
    use_agent: bool = Field(False, description="Let the agent draft the reply")


class SendMessageResponse(ApiModel):
    """Response model for a delivered reply."""

    message: MessageResponse = Field(description="The recorded outbound message")
    rationale: str = Field("", description="Why the agent drafted this reply")
    suggested_tasks: List[str] = Field(default_factory=list, description="Follow-ups suggested by the agent")


class InboundMessageRequest(ApiModel):
    """Request model for recording a message received on a channel."""

    channel: Optional[str] = Field(None, description="Channel the message arrived on")
    contact_id: Optional[str] = Field(None, description="Sender contact ID")
    thread_id: Optional[str] = Field(None, description="Thread ID")
    body: Optional[str] = Field(None, description="Message text")
    sentiment: str = Field("neutral", description="positive, neutral or negative")
    created_at: Optional[str] = Field(None, description="ISO-8601 timestamp, defaults to now")


class InboundMessageResponse(ApiModel):
    """Response model for a recorded inbound message."""

    message: MessageResponse = Field(description="The recorded inbound message")
