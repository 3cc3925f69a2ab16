"""Channel registry - maps channel identifiers to transport adapters."""

from typing import Dict, List, Optional, Type

from .base import BaseChannelAdapter
from .meta import FacebookAdapter, InstagramAdapter, MessengerAdapter
from .website import WebsiteChatAdapter
from ..errors import UnknownChannel
from ..utils.logger import get_app_logger

BUILTIN_ADAPTERS: Dict[str, Type[BaseChannelAdapter]] = {
    "website": WebsiteChatAdapter,
    "instagram": InstagramAdapter,
    "facebook": FacebookAdapter,
    "messenger": MessengerAdapter,
}


class ChannelRegistry:
    """Registry of channel adapter instances."""

    def __init__(self):
        """Initialize an empty registry."""
        self._adapters: Dict[str, BaseChannelAdapter] = {}
        self.logger = get_app_logger("channels")

    def register(self, channel: str, adapter: BaseChannelAdapter) -> None:
        """
        Register an adapter for a channel, replacing any previous one.

        Args:
            channel: Channel identifier (e.g. 'website', 'instagram')
            adapter: Adapter instance
        """
        channel = channel.lower()
        self._adapters[channel] = adapter
        self.logger.info(f"Registered channel: {channel} -> {adapter.__class__.__name__}")

    def unregister(self, channel: str) -> None:
        """
        Unregister a channel.

        Args:
            channel: Channel identifier
        """
        channel = channel.lower()
        if channel in self._adapters:
            del self._adapters[channel]
            self.logger.info(f"Unregistered channel: {channel}")

    def resolve(self, channel: Optional[str]) -> BaseChannelAdapter:
        """
        Get the adapter for a channel.

        Args:
            channel: Channel identifier

        Returns:
            The registered adapter

        Raises:
            UnknownChannel: If no adapter is registered for the channel
        """
        adapter = self._adapters.get((channel or "").lower())
        if adapter is None:
            raise UnknownChannel(channel or "", available=self.get_registered_channels())
        return adapter

    def is_registered(self, channel: str) -> bool:
        """
        Check if a channel has an adapter.

        Args:
            channel: Channel identifier

        Returns:
            True if registered, False otherwise
        """
        return channel.lower() in self._adapters

    def get_registered_channels(self) -> List[str]:
        """
        Get list of all registered channels.

        Returns:
            List of channel identifiers
        """
        return list(self._adapters.keys())

    def list_channels(self) -> List[Dict[str, object]]:
        """
        Describe every registered channel.

        Returns:
            List of dicts with channel, name, description and configured flag
        """
        return [
            {
                "channel": channel,
                "name": adapter.get_name(),
                "description": adapter.get_description(),
                "configured": adapter.is_configured(),
            }
            for channel, adapter in self._adapters.items()
        ]


def register_default_channels(registry: ChannelRegistry, settings) -> ChannelRegistry:
    """
    Register the built-in adapters enabled in settings.

    Args:
        registry: Registry to populate
        settings: Application settings instance

    Returns:
        The same registry
    """
    for channel in settings.get_enabled_channels():
        adapter_class = BUILTIN_ADAPTERS.get(channel)
        if adapter_class is None:
            registry.logger.warning(f"No built-in adapter for enabled channel: {channel}")
            continue
        registry.register(channel, adapter_class(settings.get_channel_config(channel)))
    return registry
