"""Demo inbox data for a fresh database."""

from datetime import datetime, timedelta
from typing import Optional, TYPE_CHECKING

from .database_models import CallLogDO, ContactDO, DealDO, TaskDO
from ..utils.timestamps import format_timestamp, utc_now

if TYPE_CHECKING:
    from ..services.store import InboxStore


CONTACTS = [
    ContactDO(id="c1", name="Ava Thompson", handle="ava.t", channel="website", email="ava@example.com"),
    ContactDO(id="c2", name="Marcus Lee", handle="marcus.lee", channel="instagram", tags=["vip"]),
    ContactDO(id="c3", name="Priya Patel", handle="priyap", channel="facebook"),
    ContactDO(id="c4", name="Diego Alvarez", handle="diego.alv", channel="messenger", phone="+1-555-0142"),
]

# (thread, contact, channel, direction, body, status, sentiment, minutes ago)
MESSAGES = [
    ("t1", "c1", "website", "inbound", "Hi! Do you offer a team plan for 10 people?", "new", "neutral", 95),
    ("t2", "c2", "instagram", "inbound", "Loved the new collection, when does it ship?", "pending", "positive", 240),
    ("t2", "c2", "instagram", "outbound", "Thank you! It ships next Monday.", "responded", "positive", 228),
    ("t2", "c2", "instagram", "inbound", "Perfect, can I preorder?", "pending", "positive", 60),
    ("t3", "c3", "facebook", "inbound", "My order arrived damaged, I'd like a refund.", "new", "negative", 30),
    ("t4", "c4", "messenger", "inbound", "Can we book a demo this week?", "pending", "neutral", 600),
    ("t4", "c4", "messenger", "outbound", "Absolutely, does Thursday at 2pm work?", "responded", "positive", 585),
    ("t4", "c4", "messenger", "inbound", "Thursday works, thanks!", "resolved", "positive", 570),
]


def seed_demo_data(store: "InboxStore", now: Optional[datetime] = None) -> int:
    """
    Fill an empty store with demo contacts, conversations, deals, calls and tasks.

    Args:
        store: Inbox store to seed
        now: Reference time for relative timestamps

    Returns:
        Number of messages seeded, 0 if the store already had data
    """
    if not store.is_empty():
        return 0

    now = now or utc_now()

    for contact in CONTACTS:
        store.add_contact(ContactDO(
            id=contact.id,
            name=contact.name,
            handle=contact.handle,
            channel=contact.channel,
            email=contact.email,
            phone=contact.phone,
            tags=list(contact.tags),
            created_at=now - timedelta(days=30)
        ))

    for thread_id, contact_id, channel, direction, body, status, sentiment, minutes_ago in MESSAGES:
        store.append_message(
            channel=channel,
            contact_id=contact_id,
            thread_id=thread_id,
            direction=direction,
            body=body,
            status=status,
            sentiment=sentiment,
            created_at=now - timedelta(minutes=minutes_ago)
        )

    store.deals.create(DealDO(
        id="d1", contact_id="c1", title="Team plan - 10 seats", value=4800.0,
        probability=0.4, stage="qualified", next_step="Send pricing sheet"
    ))
    store.deals.create(DealDO(
        id="d2", contact_id="c4", title="Annual subscription", value=12000.0,
        probability=0.7, stage="demo", next_step="Run demo Thursday"
    ))

    store.calls.create(CallLogDO(
        id="call1", contact_id="c4",
        recorded_at=format_timestamp(now - timedelta(days=1)),
        duration_seconds=780,
        summary="Discovery call: wants shared inbox for 3 brands.",
        follow_ups=["Share onboarding guide", "Loop in solutions engineer"]
    ))

    store.tasks.create(TaskDO(
        id="task_seed_1", description="Send pricing sheet to Ava", priority="high",
        contact_id="c1", deal_id="d1",
        due_at=format_timestamp(now + timedelta(hours=4)),
        created_at=format_timestamp(now - timedelta(hours=1))
    ))
    store.tasks.create(TaskDO(
        id="task_seed_2", description="Prepare demo environment for Diego",
        contact_id="c4", deal_id="d2",
        due_at=format_timestamp(now + timedelta(days=3)),
        created_at=format_timestamp(now - timedelta(hours=9))
    ))

    store.logger.info(f"Seeded demo data: {len(CONTACTS)} contacts, {len(MESSAGES)} messages")
    return len(MESSAGES)
