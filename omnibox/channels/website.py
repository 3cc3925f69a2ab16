"""Website chat widget adapter."""

from typing import Optional

from .base import BaseChannelAdapter
from ..utils.logger import get_app_logger


class WebsiteChatAdapter(BaseChannelAdapter):
    """
    Adapter for the embedded website chat widget.

    Replies are relayed to the widget backend through a webhook. Without a
    webhook URL the widget polls the inbox itself, so delivery is a no-op
    that always succeeds.
    """

    channel = "website"

    def __init__(self, config=None, client=None):
        super().__init__(config, client)
        self.logger = get_app_logger("channels.website")

    async def deliver(self, recipient_id: str, message: str) -> None:
        webhook_url = self.config.get("webhook_url")
        if not webhook_url:
            self.logger.debug(f"No widget webhook configured, reply to {recipient_id} left for polling")
            return

        await self._post_json(webhook_url, {
            "recipientId": recipient_id,
            "message": message,
        })
        self.logger.info(f"Relayed website reply to {recipient_id}")

    def get_name(self) -> str:
        return "Website chat"

    def get_description(self) -> Optional[str]:
        return "Embedded chat widget on the company website"
