"""Message REST API routes."""

from fastapi import APIRouter, Depends

from ..channels import ChannelRegistry
from ..models import (
    InboundMessageRequest,
    InboundMessageResponse,
    MessageResponse,
    SendMessageRequest,
    SendMessageResponse,
)
from ..services import EventBus, InboxStore, ReplyPipeline
from .dependencies import get_channel_registry, get_event_bus, get_pipeline, get_store

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.post("", response_model=SendMessageResponse)
async def send_message(
    request: SendMessageRequest,
    pipeline: ReplyPipeline = Depends(get_pipeline)
):
    """Reply to a thread, optionally drafting the reply with the agent."""
    result = await pipeline.send_reply(
        channel=request.channel,
        contact_id=request.contact_id,
        thread_id=request.thread_id,
        body=request.body,
        use_agent=request.use_agent
    )

    return SendMessageResponse(
        message=MessageResponse.model_validate(result.message),
        rationale=result.rationale,
        suggested_tasks=result.suggested_tasks
    )


@router.post("/inbound", response_model=InboundMessageResponse, status_code=201)
async def receive_message(
    request: InboundMessageRequest,
    store: InboxStore = Depends(get_store),
    events: EventBus = Depends(get_event_bus),
    registry: ChannelRegistry = Depends(get_channel_registry)
):
    """Record a message received on a channel."""
    registry.resolve(request.channel)

    message = store.append_message(
        channel=request.channel,
        contact_id=request.contact_id,
        thread_id=request.thread_id,
        direction="inbound",
        body=request.body or "",
        status="new",
        sentiment=request.sentiment,
        created_at=request.created_at
    )

    await events.publish("message.received", {
        "messageId": message.id,
        "threadId": message.thread_id,
        "channel": message.channel,
        "contactId": message.contact_id,
    })

    return InboundMessageResponse(message=MessageResponse.model_validate(message))
