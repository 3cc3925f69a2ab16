"""Offline playbook agent - keyword intents mapped to reply templates."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .base import AgentDraft, BaseAgent
from ..db.database_models import MessageDO


@dataclass(frozen=True)
class Play:
    intent: str
    keywords: Tuple[str, ...]
    reply: str
    tasks: Tuple[str, ...] = ()


PLAYS = (
    Play(
        intent="complaint",
        keywords=("refund", "broken", "damaged", "cancel", "complaint", "disappointed", "wrong"),
        reply=(
            "I'm really sorry about this. I've flagged your message to our support lead "
            "and we'll make it right as quickly as possible."
        ),
        tasks=("Escalate to support lead", "Call the customer within 24 hours"),
    ),
    Play(
        intent="pricing",
        keywords=("price", "pricing", "cost", "quote", "plan", "discount"),
        reply=(
            "Great question! I'll send over our current pricing and the plan that fits "
            "your needs best. Anything specific you'd like included in the quote?"
        ),
        tasks=("Send pricing sheet", "Follow up in 2 days"),
    ),
    Play(
        intent="booking",
        keywords=("demo", "book", "schedule", "appointment", "meeting", "call"),
        reply=(
            "Happy to set that up! Here's a link to pick a time that works for you, "
            "or let me know a slot and I'll book it."
        ),
        tasks=("Confirm meeting time",),
    ),
    Play(
        intent="shipping",
        keywords=("order", "shipping", "delivery", "tracking", "shipped", "arrive"),
        reply=(
            "Thanks for reaching out! Let me check on your order status and get back to "
            "you with tracking details shortly."
        ),
        tasks=("Look up order tracking",),
    ),
    Play(
        intent="gratitude",
        keywords=("thanks", "thank", "appreciate", "great", "awesome"),
        reply="Thanks so much! Let us know if there's anything else we can help with.",
    ),
)

CHANNEL_SIGNOFFS = {
    "instagram": " 💬",
    "messenger": "",
    "facebook": "",
    "website": "",
}


def _latest_inbound(history: List[MessageDO]) -> Optional[MessageDO]:
    inbound = [message for message in history if message.direction == "inbound"]
    if not inbound:
        return None
    return max(inbound, key=lambda message: message.created_at)


def match_play(text: str) -> Optional[Play]:
    """Return the first play whose keywords appear in the text."""
    lowered = text.lower()
    for play in PLAYS:
        if any(keyword in lowered for keyword in play.keywords):
            return play
    return None


class PlaybookAgent(BaseAgent):
    """Drafts replies from canned plays; needs no network access."""

    async def draft(self, history: List[MessageDO], channel: str) -> AgentDraft:
        latest = _latest_inbound(history)
        if latest is None:
            return AgentDraft(
                reply="Hi there! Just checking in. Is there anything we can help you with?",
                rationale=f"{self.name} found no inbound message, so it sent a check-in.",
                suggested_tasks=[]
            )

        play = match_play(latest.body)
        if play is None:
            return AgentDraft(
                reply="Thanks for your message! A member of our team will follow up shortly.",
                rationale=f"{self.name} could not match an intent and acknowledged the message.",
                suggested_tasks=["Review conversation and reply personally"]
            )

        return AgentDraft(
            reply=play.reply + CHANNEL_SIGNOFFS.get(channel, ""),
            rationale=f"{self.name} detected a {play.intent} request in the latest message.",
            suggested_tasks=list(play.tasks)
        )
