"""Task API models."""

from typing import Optional
from pydantic import Field

from .base import ApiModel


class TaskResponse(ApiModel):
    """A follow-up task."""

    id: str = Field(description="Task ID")
    description: str = Field(description="What needs doing")
    status: str = Field(description="open or completed")
    priority: str = Field(description="low, normal or high")
    contact_id: Optional[str] = Field(None, description="Related contact")
    message_id: Optional[str] = Field(None, description="Related message")
    deal_id: Optional[str] = Field(None, description="Related deal")
    due_at: Optional[str] = Field(None, description="Due date")
    created_at: Optional[str] = Field(None, description="Creation timestamp")
    completed_at: Optional[str] = Field(None, description="Completion timestamp")


class CreateTaskRequest(ApiModel):
    """Request model for creating a task."""

    description: Optional[str] = Field(None, description="What needs doing")
    contact_id: Optional[str] = Field(None, description="Related contact")
    message_id: Optional[str] = Field(None, description="Related message")
    deal_id: Optional[str] = Field(None, description="Related deal")
    due_at: Optional[str] = Field(None, description="ISO-8601 due date")
    priority: Optional[str] = Field(None, description="low, normal or high (default normal)")


class CompleteTaskRequest(ApiModel):
    """Request model for completing a task."""

    id: Optional[str] = Field(None, description="Task ID")


class TaskEnvelope(ApiModel):
    """Response wrapper for a single task."""

    task: TaskResponse
