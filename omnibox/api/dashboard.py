"""Dashboard and thread REST API routes."""

from datetime import timedelta
from fastapi import APIRouter, Depends

from ..config import Settings
from ..models import (
    DashboardResponse,
    MetricsResponse,
    SnapshotResponse,
    ThreadListResponse,
    ThreadResponse,
)
from ..services import InboxStore, build_threads, compute_metrics
from .dependencies import get_settings, get_store

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    store: InboxStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    """Snapshot of the inbox with freshly computed metrics."""
    snapshot = store.get_dashboard_snapshot()
    metrics = compute_metrics(snapshot, due_soon_window=timedelta(hours=settings.due_soon_hours))

    return DashboardResponse(
        snapshot=SnapshotResponse.model_validate(snapshot),
        metrics=MetricsResponse.model_validate(metrics)
    )


@router.get("/threads", response_model=ThreadListResponse)
async def list_threads(store: InboxStore = Depends(get_store)):
    """Conversation threads, most recently active first."""
    snapshot = store.get_dashboard_snapshot()
    threads = build_threads(snapshot.messages, snapshot.contacts)

    return ThreadListResponse(
        threads=[ThreadResponse.model_validate(thread) for thread in threads],
        total=len(threads)
    )
