"""Meta Graph API adapters - Facebook, Messenger and Instagram."""

from typing import Optional

import httpx

from .base import BaseChannelAdapter
from ..errors import DeliveryFailure
from ..utils.logger import get_app_logger


class MetaGraphAdapter(BaseChannelAdapter):
    """
    Shared Send API client for Meta channels.

    Messages are sent with ``POST {api_base}/{account_id}/messages`` using a
    page access token. Meta returns errors as ``{"error": {"message": ...}}``;
    that message is forwarded as the delivery failure reason.
    """

    messaging_type = "RESPONSE"

    def __init__(self, config=None, client=None):
        super().__init__(config, client)
        self.logger = get_app_logger(f"channels.{self.channel}")

    def is_configured(self) -> bool:
        return bool(self.config.get("access_token") and self.config.get("account_id"))

    async def deliver(self, recipient_id: str, message: str) -> None:
        if not self.is_configured():
            raise DeliveryFailure(
                f"{self.get_name()} is not configured: page access token and account id are required",
                channel=self.channel
            )

        api_base = self.config.get("api_base", "https://graph.facebook.com/v19.0").rstrip("/")
        url = f"{api_base}/{self.config['account_id']}/messages"

        result = await self._post_json(
            url,
            {
                "recipient": {"id": recipient_id},
                "messaging_type": self.messaging_type,
                "message": {"text": message},
            },
            params={"access_token": self.config["access_token"]}
        )
        self.logger.info(f"Delivered {self.channel} message {result.get('message_id', '?')} to {recipient_id}")

    def _error_reason(self, response: httpx.Response) -> str:
        try:
            error = response.json().get("error", {})
        except ValueError:
            error = {}
        if isinstance(error, dict) and error.get("message"):
            return f"{self.get_name()} error: {error['message']}"
        return super()._error_reason(response)


class FacebookAdapter(MetaGraphAdapter):
    """Replies to Facebook page conversations."""

    channel = "facebook"

    def get_name(self) -> str:
        return "Facebook"

    def get_description(self) -> Optional[str]:
        return "Facebook page inbox"


class MessengerAdapter(MetaGraphAdapter):
    """Replies to Messenger chats."""

    channel = "messenger"

    def get_name(self) -> str:
        return "Messenger"

    def get_description(self) -> Optional[str]:
        return "Facebook Messenger chats"


class InstagramAdapter(MetaGraphAdapter):
    """Replies to Instagram direct messages through the business account."""

    channel = "instagram"

    def get_name(self) -> str:
        return "Instagram"

    def get_description(self) -> Optional[str]:
        return "Instagram direct messages"
