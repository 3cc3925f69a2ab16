"""Base adapter for channel transports."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from ..errors import DeliveryFailure


class BaseChannelAdapter(ABC):
    """
    Abstract base class for channel transport adapters.

    Each adapter exposes a single capability, ``deliver``, which sends one
    message to one recipient through the provider API. Retry policy, if
    any, belongs to the adapter; the registry and the reply pipeline never
    retry.
    """

    channel: str = ""

    def __init__(self, config: Optional[Dict[str, Any]] = None, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the adapter with configuration.

        Args:
            config: Configuration dictionary for the adapter
            client: Optional shared HTTP client; one is created per call otherwise
        """
        self.config = config or {}
        self._client = client

    @abstractmethod
    async def deliver(self, recipient_id: str, message: str) -> None:
        """
        Deliver a message to a recipient.

        Args:
            recipient_id: Provider-side recipient identifier
            message: Message text

        Raises:
            DeliveryFailure: With the provider's error text on failure
        """
        pass

    def get_name(self) -> str:
        """
        Get the human-readable name of this channel.

        Returns:
            Name of the channel
        """
        return self.__class__.__name__.replace("Adapter", "")

    def get_description(self) -> Optional[str]:
        """
        Get a description of this channel.

        Returns:
            Description string, or None if not available
        """
        return None

    def is_configured(self) -> bool:
        """
        Whether the adapter has the credentials it needs.

        Returns:
            True if configuration is complete
        """
        return True

    @property
    def timeout(self) -> float:
        return float(self.config.get("timeout", 10.0))

    async def _post_json(self, url: str, payload: Dict[str, Any], params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        POST a JSON payload and return the decoded response.

        Transport errors and non-2xx responses become DeliveryFailure
        carrying the provider's error message.
        """
        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, json=payload, params=params)
        except httpx.HTTPError as e:
            raise DeliveryFailure(f"{self.get_name()} request failed: {e}", channel=self.channel)

        if response.is_error:
            raise DeliveryFailure(self._error_reason(response), channel=self.channel)

        try:
            return response.json()
        except ValueError:
            return {}

    def _error_reason(self, response: httpx.Response) -> str:
        """Extract a provider error message from a failed response."""
        return f"{self.get_name()} responded {response.status_code}: {response.text or response.reason_phrase}"
