"""Tests for the playbook agent."""

from omnibox.agents import PlaybookAgent
from omnibox.agents.playbook import match_play
from omnibox.db.database_models import MessageDO


def _msg(body, direction="inbound", created_at="2025-01-01T10:00:00.000Z"):
    return MessageDO(
        id=f"m-{created_at}",
        channel="website",
        contact_id="c1",
        thread_id="t1",
        direction=direction,
        body=body,
        status="new",
        sentiment="neutral",
        created_at=created_at
    )


class TestMatchPlay:
    """SUT: match_play"""

    def test_complaint_before_other_intents(self):
        """A refund request about an order is a complaint, not shipping."""
        assert match_play("My order arrived damaged, refund please").intent == "complaint"

    def test_pricing(self):
        assert match_play("Do you offer a team plan?").intent == "pricing"

    def test_no_match(self):
        assert match_play("hello") is None


class TestPlaybookAgent:
    """SUT: PlaybookAgent.draft"""

    async def test_drafts_from_latest_inbound(self):
        history = [
            _msg("What does the pro plan cost?", created_at="2025-01-01T09:00:00.000Z"),
            _msg("Sure, one moment", direction="outbound", created_at="2025-01-01T09:05:00.000Z"),
            _msg("Can we book a demo?", created_at="2025-01-01T09:10:00.000Z"),
        ]

        draft = await PlaybookAgent({"name": "Nova"}).draft(history, "website")

        assert "set that up" in draft.reply
        assert draft.rationale == "Nova detected a booking request in the latest message."
        assert draft.suggested_tasks == ["Confirm meeting time"]

    async def test_channel_signoff(self):
        draft = await PlaybookAgent().draft([_msg("thanks!")], "instagram")
        assert draft.reply.endswith(" 💬")

    async def test_unmatched_message(self):
        draft = await PlaybookAgent().draft([_msg("hello")], "website")
        assert draft.reply
        assert draft.suggested_tasks == ["Review conversation and reply personally"]

    async def test_no_inbound_message(self):
        draft = await PlaybookAgent().draft([], "website")
        assert draft.reply
        assert "no inbound message" in draft.rationale
        assert draft.suggested_tasks == []
