"""Service instances shared by the routers (set by main.py)."""

from fastapi import HTTPException

from ..channels import ChannelRegistry
from ..config import Settings, settings as default_settings
from ..services import EventBus, InboxStore, ReplyPipeline, TaskLedger

store: InboxStore = None
pipeline: ReplyPipeline = None
task_ledger: TaskLedger = None
channel_registry: ChannelRegistry = None
event_bus: EventBus = None
settings: Settings = default_settings


def get_store() -> InboxStore:
    """Dependency to get the inbox store."""
    if store is None:
        raise HTTPException(status_code=500, detail="Store not initialized")
    return store


def get_pipeline() -> ReplyPipeline:
    """Dependency to get the reply pipeline."""
    if pipeline is None:
        raise HTTPException(status_code=500, detail="Reply pipeline not initialized")
    return pipeline


def get_task_ledger() -> TaskLedger:
    """Dependency to get the task ledger."""
    if task_ledger is None:
        raise HTTPException(status_code=500, detail="Task ledger not initialized")
    return task_ledger


def get_channel_registry() -> ChannelRegistry:
    """Dependency to get the channel registry."""
    if channel_registry is None:
        raise HTTPException(status_code=500, detail="Channel registry not initialized")
    return channel_registry


def get_event_bus() -> EventBus:
    """Dependency to get the event bus."""
    if event_bus is None:
        raise HTTPException(status_code=500, detail="Event bus not initialized")
    return event_bus


def get_settings() -> Settings:
    """Dependency to get the application settings."""
    return settings
