"""Dashboard, thread and channel API integration tests."""

from httpx import AsyncClient
from starlette.testclient import TestClient

from omnibox.errors import StoreFailure


class TestDashboard:
    """GET /api/dashboard"""

    async def test_empty_inbox(self, client: AsyncClient):
        response = await client.get("/api/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert [c["id"] for c in data["snapshot"]["contacts"]] == ["c1", "c2"]
        assert data["snapshot"]["messages"] == []
        assert data["metrics"] == {
            "openConversations": 0,
            "avgFirstResponseMinutes": 0.0,
            "sentimentBreakdown": {"positive": 0, "neutral": 0, "negative": 0},
            "tasksDueSoon": [],
        }

    async def test_first_response_time(self, client: AsyncClient, services):
        services.store.append_message(
            "website", "c1", "t1", "inbound", "Hi", "new", "neutral", created_at="2025-01-01T10:00:00Z"
        )
        services.store.append_message(
            "website", "c1", "t1", "outbound", "Hello!", "responded", "positive", created_at="2025-01-01T10:12:00Z"
        )

        metrics = (await client.get("/api/dashboard")).json()["metrics"]

        assert metrics["avgFirstResponseMinutes"] == 12.0
        assert metrics["openConversations"] == 1

    async def test_store_failure_is_503(self, client: AsyncClient, services, monkeypatch):
        def fail():
            raise StoreFailure("database unavailable")

        monkeypatch.setattr(services.store.messages, "list_all", fail)

        response = await client.get("/api/dashboard")

        assert response.status_code == 503
        assert response.json() == {"error": "database unavailable"}


class TestThreads:
    """GET /api/threads"""

    async def test_threads_most_recent_first(self, client: AsyncClient, services):
        services.store.append_message(
            "website", "c1", "t1", "inbound", "Hi", "new", "neutral", created_at="2025-01-01T10:00:00Z"
        )
        services.store.append_message(
            "instagram", "c2", "t2", "inbound", "Hey", "pending", "positive", created_at="2025-01-01T11:00:00Z"
        )

        response = await client.get("/api/threads")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [t["threadId"] for t in data["threads"]] == ["t2", "t1"]
        assert data["threads"][0]["contact"]["name"] == "Marcus Lee"
        assert data["threads"][0]["lastMessageAt"] == "2025-01-01T11:00:00.000Z"
        assert data["threads"][0]["status"] == "pending"


class TestChannels:
    """GET /api/channels"""

    async def test_list(self, client: AsyncClient):
        response = await client.get("/api/channels")

        assert response.status_code == 200
        assert [c["channel"] for c in response.json()["channels"]] == ["website", "instagram"]


class TestEventStream:
    """WS /api/events"""

    def test_ping_and_events(self, test_app):
        with TestClient(test_app) as tc:
            with tc.websocket_connect("/api/events") as ws:
                assert ws.receive_json() == {"type": "connected"}

                ws.send_json({"type": "ping"})
                assert ws.receive_json() == {"type": "pong"}

                response = tc.post("/api/tasks", json={"description": "Call back"})
                assert response.status_code == 200

                event = ws.receive_json()
                assert event["type"] == "task.created"
                assert event["payload"]["description"] == "Call back"
                assert event["createdAt"].endswith("Z")

    def test_invalid_json(self, test_app):
        with TestClient(test_app) as tc:
            with tc.websocket_connect("/api/events") as ws:
                ws.receive_json()
                ws.send_text("not json")
                assert ws.receive_json()["type"] == "error"
