"""Task REST API routes."""

from fastapi import APIRouter, Depends

from ..models import CompleteTaskRequest, CreateTaskRequest, TaskEnvelope, TaskResponse
from ..services import TaskLedger
from .dependencies import get_task_ledger

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.post("", response_model=TaskEnvelope)
async def create_task(
    request: CreateTaskRequest,
    ledger: TaskLedger = Depends(get_task_ledger)
):
    """Create an open follow-up task."""
    task = await ledger.create_task(
        description=request.description,
        contact_id=request.contact_id,
        message_id=request.message_id,
        deal_id=request.deal_id,
        due_at=request.due_at,
        priority=request.priority
    )
    return TaskEnvelope(task=TaskResponse.model_validate(task))


@router.patch("", response_model=TaskEnvelope)
async def complete_task(
    request: CompleteTaskRequest,
    ledger: TaskLedger = Depends(get_task_ledger)
):
    """Mark a task completed."""
    task = await ledger.complete_task(request.id)
    return TaskEnvelope(task=TaskResponse.model_validate(task))
