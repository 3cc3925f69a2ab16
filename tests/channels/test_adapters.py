"""Tests for channel adapters."""

import json

import httpx
import pytest

from omnibox.channels import FacebookAdapter, InstagramAdapter, MessengerAdapter, WebsiteChatAdapter
from omnibox.errors import DeliveryFailure


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


META_CONFIG = {
    "api_base": "https://graph.test/v19.0",
    "access_token": "page-token",
    "account_id": "12345",
    "timeout": 5.0,
}


class TestWebsiteChatAdapter:
    """SUT: WebsiteChatAdapter.deliver"""

    async def test_no_webhook_is_noop(self):
        """Without a relay URL delivery succeeds without any request."""
        calls = []
        async with _client(lambda request: calls.append(request) or httpx.Response(200)) as client:
            await WebsiteChatAdapter({}, client=client).deliver("c1", "hi")
        assert calls == []

    async def test_posts_to_webhook(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"ok": True})

        async with _client(handler) as client:
            adapter = WebsiteChatAdapter({"webhook_url": "https://widget.test/relay"}, client=client)
            await adapter.deliver("c1", "hi there")

        assert str(requests[0].url) == "https://widget.test/relay"
        assert json.loads(requests[0].content) == {"recipientId": "c1", "message": "hi there"}

    async def test_error_response(self):
        async with _client(lambda request: httpx.Response(503, text="widget down")) as client:
            adapter = WebsiteChatAdapter({"webhook_url": "https://widget.test/relay"}, client=client)
            with pytest.raises(DeliveryFailure, match="widget down"):
                await adapter.deliver("c1", "hi")

    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        async with _client(handler) as client:
            adapter = WebsiteChatAdapter({"webhook_url": "https://widget.test/relay"}, client=client)
            with pytest.raises(DeliveryFailure, match="connection refused"):
                await adapter.deliver("c1", "hi")


class TestMetaGraphAdapter:
    """SUT: MetaGraphAdapter.deliver"""

    async def test_send_api_request(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"recipient_id": "c2", "message_id": "mid.1"})

        async with _client(handler) as client:
            await InstagramAdapter(META_CONFIG, client=client).deliver("c2", "Hello!")

        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v19.0/12345/messages"
        assert request.url.params["access_token"] == "page-token"
        assert json.loads(request.content) == {
            "recipient": {"id": "c2"},
            "messaging_type": "RESPONSE",
            "message": {"text": "Hello!"},
        }

    async def test_graph_error_message_forwarded(self):
        """The provider's own error text becomes the failure reason."""
        error = {"error": {"message": "(#100) No matching user found", "code": 100}}
        async with _client(lambda request: httpx.Response(400, json=error)) as client:
            with pytest.raises(DeliveryFailure) as exc_info:
                await FacebookAdapter(META_CONFIG, client=client).deliver("c3", "hi")

        assert "(#100) No matching user found" in exc_info.value.reason
        assert exc_info.value.channel == "facebook"

    async def test_not_configured(self):
        adapter = MessengerAdapter({"api_base": "https://graph.test/v19.0"})
        assert not adapter.is_configured()
        with pytest.raises(DeliveryFailure, match="not configured"):
            await adapter.deliver("c4", "hi")

    def test_names(self):
        assert FacebookAdapter().get_name() == "Facebook"
        assert MessengerAdapter().get_name() == "Messenger"
        assert InstagramAdapter().get_name() == "Instagram"
        assert InstagramAdapter(META_CONFIG).is_configured()
