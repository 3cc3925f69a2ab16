"""Pytest fixtures for API testing."""

import pytest
from types import SimpleNamespace
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI

from omnibox.api import channels, dashboard, dependencies, messages, tasks, websocket
from omnibox.api import register_exception_handlers
from omnibox.config import Settings
from omnibox.services import EventBus, ReplyPipeline, TaskLedger


@pytest.fixture
def services(store, registry, website_adapter, stub_agent):
    """Inject services into the routers for one test."""
    events = EventBus()
    ledger = TaskLedger(store, events)
    pipeline = ReplyPipeline(
        store=store,
        channels=registry,
        agent=stub_agent,
        events=events,
        task_ledger=ledger,
        agent_timeout=1.0,
        delivery_timeout=1.0
    )

    dependencies.store = store
    dependencies.pipeline = pipeline
    dependencies.task_ledger = ledger
    dependencies.channel_registry = registry
    dependencies.event_bus = events
    dependencies.settings = Settings(log_level="WARNING")

    yield SimpleNamespace(
        store=store,
        registry=registry,
        adapter=website_adapter,
        agent=stub_agent,
        events=events,
        ledger=ledger,
        pipeline=pipeline
    )

    dependencies.store = None
    dependencies.pipeline = None
    dependencies.task_ledger = None
    dependencies.channel_registry = None
    dependencies.event_bus = None


@pytest.fixture
def test_app(services):
    """Create a test app without lifespan (to avoid touching real storage)."""
    app = FastAPI(title="Omnibox Test")
    register_exception_handlers(app)
    app.include_router(dashboard.router)
    app.include_router(messages.router)
    app.include_router(tasks.router)
    app.include_router(channels.router)
    app.include_router(websocket.router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "1.0.0"}

    return app


@pytest.fixture
async def client(test_app):
    """Create async HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
