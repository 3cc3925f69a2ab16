"""Channel transport adapters and their registry."""

from .base import BaseChannelAdapter
from .website import WebsiteChatAdapter
from .meta import MetaGraphAdapter, FacebookAdapter, MessengerAdapter, InstagramAdapter
from .registry import ChannelRegistry, BUILTIN_ADAPTERS, register_default_channels

__all__ = [
    "BaseChannelAdapter",
    "WebsiteChatAdapter",
    "MetaGraphAdapter",
    "FacebookAdapter",
    "MessengerAdapter",
    "InstagramAdapter",
    "ChannelRegistry",
    "BUILTIN_ADAPTERS",
    "register_default_channels",
]
