"""Call log repository for database operations."""

import json
from typing import List
from .base import BaseRepository
from ..database_models.call import CallLogDO


class CallRepository(BaseRepository):
    """Repository for call log records."""

    def create(self, call: CallLogDO) -> CallLogDO:
        """Insert a call log record."""
        try:
            self.conn.execute("""
                INSERT INTO calls (id, contact_id, recorded_at, duration_seconds, summary, follow_ups)
                VALUES (?, ?, ?, ?, ?, ?)
            """, [
                call.id,
                call.contact_id,
                call.recorded_at,
                call.duration_seconds,
                call.summary,
                json.dumps(call.follow_ups)
            ])
            self.conn.commit()
            return call
        except Exception as e:
            raise self._store_failure(f"create call {call.id}", e)

    def list_all(self) -> List[CallLogDO]:
        """List call logs, most recent first."""
        try:
            results = self.conn.execute("""
                SELECT id, contact_id, recorded_at, duration_seconds, summary, follow_ups
                FROM calls
                ORDER BY recorded_at DESC
            """).fetchall()
            return [
                CallLogDO(
                    id=row[0],
                    contact_id=row[1],
                    recorded_at=row[2],
                    duration_seconds=row[3],
                    summary=row[4],
                    follow_ups=json.loads(row[5]) if row[5] else []
                )
                for row in results
            ]
        except Exception as e:
            raise self._store_failure("list calls", e)
