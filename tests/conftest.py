"""Shared pytest fixtures."""

import asyncio
import pytest

from omnibox.agents.base import AgentDraft, BaseAgent
from omnibox.channels import BaseChannelAdapter, ChannelRegistry
from omnibox.db import DatabaseConnection
from omnibox.db.database_models import ContactDO
from omnibox.services import InboxStore


class RecordingAdapter(BaseChannelAdapter):
    """Channel adapter that records deliveries instead of sending them."""

    def __init__(self, channel: str = "website", error: Exception = None, delay: float = 0.0):
        super().__init__({})
        self.channel = channel
        self.error = error
        self.delay = delay
        self.sent = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def deliver(self, recipient_id: str, message: str) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.error is not None:
                raise self.error
            self.sent.append((recipient_id, message))
        finally:
            self.in_flight -= 1


class StubAgent(BaseAgent):
    """Agent returning a fixed draft."""

    def __init__(self, result: AgentDraft = None, delay: float = 0.0, error: Exception = None):
        super().__init__({"name": "Nova"})
        self.result = result if result is not None else AgentDraft(
            reply="Thanks!",
            rationale="ack",
            suggested_tasks=["follow up in 2 days"]
        )
        self.delay = delay
        self.error = error
        self.calls = []

    async def draft(self, history, channel):
        self.calls.append((list(history), channel))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def adapter_factory():
    """The RecordingAdapter class."""
    return RecordingAdapter


@pytest.fixture
def agent_factory():
    """The StubAgent class."""
    return StubAgent


@pytest.fixture
def db_conn(tmp_path):
    """Provide a fresh database connection."""
    db = DatabaseConnection(str(tmp_path / "test.db"))
    yield db
    db.close()


@pytest.fixture
def store(db_conn):
    """Inbox store with two contacts: c1 on website, c2 on instagram."""
    inbox = InboxStore(db_conn)
    inbox.add_contact(ContactDO(id="c1", name="Ava Thompson", handle="ava.t", channel="website"))
    inbox.add_contact(ContactDO(id="c2", name="Marcus Lee", handle="marcus.lee", channel="instagram"))
    return inbox


@pytest.fixture
def website_adapter():
    return RecordingAdapter("website")


@pytest.fixture
def instagram_adapter():
    return RecordingAdapter("instagram")


@pytest.fixture
def registry(website_adapter, instagram_adapter):
    """Channel registry with recording website and instagram adapters."""
    channels = ChannelRegistry()
    channels.register("website", website_adapter)
    channels.register("instagram", instagram_adapter)
    return channels


@pytest.fixture
def stub_agent():
    return StubAgent()
