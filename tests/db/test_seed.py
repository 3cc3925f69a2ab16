"""Tests for demo data seeding."""

from datetime import datetime, timezone

from omnibox.db import DatabaseConnection
from omnibox.db.seed import MESSAGES, seed_demo_data
from omnibox.services import InboxStore, build_threads, compute_metrics


NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestSeedDemoData:
    """SUT: seed_demo_data"""

    def test_seeds_empty_store(self, tmp_path):
        db = DatabaseConnection(str(tmp_path / "seed.db"))
        store = InboxStore(db)

        assert seed_demo_data(store, now=NOW) == len(MESSAGES)

        snapshot = store.get_dashboard_snapshot()
        assert len(snapshot.contacts) == 4
        assert len(snapshot.messages) == len(MESSAGES)
        assert len(snapshot.deals) == 2
        assert len(snapshot.calls) == 1
        assert len(snapshot.tasks) == 2
        db.close()

    def test_skips_non_empty_store(self, store):
        assert seed_demo_data(store, now=NOW) == 0
        assert store.messages.count() == 0

    def test_dashboard_over_demo_data(self, tmp_path):
        """The demo inbox has three open threads and one due-soon task."""
        db = DatabaseConnection(str(tmp_path / "seed.db"))
        store = InboxStore(db)
        seed_demo_data(store, now=NOW)

        snapshot = store.get_dashboard_snapshot()
        metrics = compute_metrics(snapshot, now=NOW)

        assert len(build_threads(snapshot.messages, snapshot.contacts)) == 4
        assert metrics.open_conversations == 3
        assert [t.id for t in metrics.tasks_due_soon] == ["task_seed_1"]
        assert sum(metrics.sentiment_breakdown.values()) == len(MESSAGES)
        db.close()
