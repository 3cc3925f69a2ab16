"""Message database model."""

from dataclasses import dataclass

DIRECTIONS = ("inbound", "outbound")

# Message lifecycle. A thread whose latest message is in a terminal
# status no longer counts as an open conversation.
STATUSES = ("new", "pending", "responded", "resolved", "closed")
TERMINAL_STATUSES = frozenset({"resolved", "closed"})

SENTIMENTS = ("positive", "neutral", "negative")


@dataclass(frozen=True)
class MessageDO:
    """Message data object - maps to messages table. Never mutated."""

    id: str
    channel: str
    contact_id: str
    thread_id: str
    direction: str
    body: str
    status: str
    sentiment: str
    created_at: str
