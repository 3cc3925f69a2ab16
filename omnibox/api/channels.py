"""Channel REST API routes."""

from fastapi import APIRouter, Depends

from ..channels import ChannelRegistry
from ..models import ChannelInfo, ChannelListResponse
from .dependencies import get_channel_registry

router = APIRouter(prefix="/api/channels", tags=["Channels"])


@router.get("", response_model=ChannelListResponse)
async def list_channels(registry: ChannelRegistry = Depends(get_channel_registry)):
    """List registered channel adapters."""
    return ChannelListResponse(
        channels=[ChannelInfo(**info) for info in registry.list_channels()]
    )
