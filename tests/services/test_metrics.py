"""Tests for the metrics aggregator."""

from datetime import datetime, timedelta, timezone

from omnibox.db.database_models import ContactDO, DashboardSnapshot, MessageDO, TaskDO
from omnibox.services import compute_metrics
from omnibox.services.metrics import first_response_minutes, sentiment_breakdown, tasks_due_soon


NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

CONTACTS = [ContactDO(id="c1", name="Ava", handle="ava", channel="website")]


def _msg(id, thread_id, minute, direction="inbound", status="new", sentiment="neutral"):
    return MessageDO(
        id=id,
        channel="website",
        contact_id="c1",
        thread_id=thread_id,
        direction=direction,
        body=id,
        status=status,
        sentiment=sentiment,
        created_at=f"2025-01-01T10:{minute:02d}:00.000Z"
    )


def _task(id, due_in=None, status="open"):
    due_at = None
    if due_in is not None:
        due_at = (NOW + due_in).strftime("%Y-%m-%dT%H:%M:%S.000Z")
    return TaskDO(id=id, description=id, status=status, due_at=due_at)


class TestFirstResponseMinutes:
    """SUT: first_response_minutes"""

    def test_answered(self):
        messages = [_msg("m1", "t1", 0), _msg("m2", "t1", 30, direction="outbound")]
        assert first_response_minutes(messages) == 30.0

    def test_outbound_before_inbound_ignored(self):
        """Only outbound messages after the first inbound count."""
        messages = [
            _msg("m0", "t1", 0, direction="outbound"),
            _msg("m1", "t1", 10),
            _msg("m2", "t1", 25, direction="outbound"),
        ]
        assert first_response_minutes(messages) == 15.0

    def test_unanswered(self):
        assert first_response_minutes([_msg("m1", "t1", 0)]) is None

    def test_uses_timestamps_not_order(self):
        messages = [_msg("m2", "t1", 20, direction="outbound"), _msg("m1", "t1", 5)]
        assert first_response_minutes(messages) == 15.0


class TestSentimentBreakdown:
    """SUT: sentiment_breakdown"""

    def test_counts_sum_to_messages(self):
        messages = [
            _msg("m1", "t1", 0, sentiment="positive"),
            _msg("m2", "t1", 1, sentiment="negative"),
            _msg("m3", "t2", 2, sentiment="negative"),
            _msg("m4", "t2", 3),
        ]
        breakdown = sentiment_breakdown(messages)
        assert breakdown == {"positive": 1, "neutral": 1, "negative": 2}
        assert sum(breakdown.values()) == len(messages)

    def test_all_buckets_present(self):
        assert sentiment_breakdown([]) == {"positive": 0, "neutral": 0, "negative": 0}

    def test_unknown_sentiment_counts_as_neutral(self):
        breakdown = sentiment_breakdown([_msg("m1", "t1", 0, sentiment="mixed")])
        assert breakdown["neutral"] == 1


class TestTasksDueSoon:
    """SUT: tasks_due_soon"""

    def test_window_and_order(self):
        tasks = [
            _task("later", timedelta(hours=20)),
            _task("soon", timedelta(hours=1)),
            _task("too_far", timedelta(hours=30)),
            _task("overdue", timedelta(hours=-2)),
            _task("no_due"),
        ]
        assert [t.id for t in tasks_due_soon(tasks, NOW)] == ["soon", "later"]

    def test_completed_tasks_excluded(self):
        tasks = [_task("done", timedelta(hours=1), status="completed")]
        assert tasks_due_soon(tasks, NOW) == []

    def test_window_bounds_inclusive(self):
        tasks = [_task("edge", timedelta(hours=24)), _task("now", timedelta(0))]
        assert [t.id for t in tasks_due_soon(tasks, NOW)] == ["now", "edge"]

    def test_custom_window(self):
        tasks = [_task("t", timedelta(hours=30))]
        assert [t.id for t in tasks_due_soon(tasks, NOW, timedelta(hours=48))] == ["t"]


class TestComputeMetrics:
    """SUT: compute_metrics"""

    def _snapshot(self):
        messages = [
            # t1 answered after 30 minutes
            _msg("m1", "t1", 0),
            _msg("m2", "t1", 30, direction="outbound", status="responded", sentiment="positive"),
            # t2 answered after 10 minutes, then resolved
            _msg("m3", "t2", 5),
            _msg("m4", "t2", 15, direction="outbound", status="responded", sentiment="positive"),
            _msg("m5", "t2", 20, status="resolved", sentiment="positive"),
            # t3 unanswered
            _msg("m6", "t3", 40, sentiment="negative"),
        ]
        tasks = [_task("soon", timedelta(hours=2)), _task("far", timedelta(days=3))]
        return DashboardSnapshot(contacts=CONTACTS, messages=messages, tasks=tasks)

    def test_open_conversations(self):
        """Threads whose latest message is resolved or closed are not open."""
        assert compute_metrics(self._snapshot(), now=NOW).open_conversations == 2

    def test_average_first_response(self):
        assert compute_metrics(self._snapshot(), now=NOW).avg_first_response_minutes == 20.0

    def test_unanswered_thread_excluded(self):
        """Inbound at t=0 answered at t=5, plus an unanswered thread, averages 5."""
        messages = [
            _msg("m1", "t1", 0),
            _msg("m2", "t1", 5, direction="outbound"),
            _msg("m3", "t2", 1),
        ]
        result = compute_metrics(DashboardSnapshot(contacts=CONTACTS, messages=messages), now=NOW)
        assert result.avg_first_response_minutes == 5.0

    def test_average_rounded(self):
        messages = [
            _msg("m1", "t1", 0), _msg("m2", "t1", 1, direction="outbound"),
            _msg("m3", "t2", 0), _msg("m4", "t2", 1, direction="outbound"),
            _msg("m5", "t3", 0), _msg("m6", "t3", 2, direction="outbound"),
        ]
        result = compute_metrics(DashboardSnapshot(contacts=CONTACTS, messages=messages), now=NOW)
        assert result.avg_first_response_minutes == 1.3

    def test_no_answered_threads(self):
        snapshot = DashboardSnapshot(contacts=CONTACTS, messages=[_msg("m1", "t1", 0)])
        assert compute_metrics(snapshot, now=NOW).avg_first_response_minutes == 0.0

    def test_empty_snapshot(self):
        result = compute_metrics(DashboardSnapshot(), now=NOW)
        assert result.open_conversations == 0
        assert result.avg_first_response_minutes == 0.0
        assert result.sentiment_breakdown == {"positive": 0, "neutral": 0, "negative": 0}
        assert result.tasks_due_soon == []

    def test_breakdown_and_due_soon(self):
        result = compute_metrics(self._snapshot(), now=NOW)
        assert result.sentiment_breakdown == {"positive": 3, "neutral": 2, "negative": 1}
        assert [t.id for t in result.tasks_due_soon] == ["soon"]

    def test_deterministic(self):
        snapshot = self._snapshot()
        assert compute_metrics(snapshot, now=NOW) == compute_metrics(snapshot, now=NOW)
