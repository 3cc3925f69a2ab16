"""Thread builder - groups the flat message log into conversations."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..db.database_models import ContactDO, MessageDO


@dataclass
class ConversationThread:
    """One conversation with one contact on one channel. Derived, never stored."""

    thread_id: str
    channel: str
    contact: ContactDO
    messages: List[MessageDO] = field(default_factory=list)
    last_message_at: str = ""
    status: str = ""


def build_threads(
    messages: Iterable[MessageDO],
    contacts: Iterable[ContactDO]
) -> List[ConversationThread]:
    """
    Group messages into threads, most recently active first.

    Messages keep their log order inside a thread. A thread's
    ``last_message_at`` and ``status`` come from its latest message by
    ``created_at``, whatever the log order. Messages whose contact is
    unknown are left out. Threads with equal ``last_message_at`` keep the
    order in which they were first seen.

    Args:
        messages: The message log
        contacts: The contact directory

    Returns:
        List of ConversationThread
    """
    contact_map = {contact.id: contact for contact in contacts}
    grouped: Dict[str, ConversationThread] = {}

    for message in messages:
        contact = contact_map.get(message.contact_id)
        if contact is None:
            continue

        thread = grouped.get(message.thread_id)
        if thread is None:
            grouped[message.thread_id] = ConversationThread(
                thread_id=message.thread_id,
                channel=message.channel,
                contact=contact,
                messages=[message],
                last_message_at=message.created_at,
                status=message.status
            )
            continue

        thread.messages.append(message)
        # Canonical timestamps compare chronologically as strings
        if message.created_at > thread.last_message_at:
            thread.last_message_at = message.created_at
            thread.status = message.status

    return sorted(grouped.values(), key=lambda t: t.last_message_at, reverse=True)
