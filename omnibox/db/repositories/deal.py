"""Deal repository for database operations."""

from typing import List
from .base import BaseRepository
from ..database_models.deal import DealDO


class DealRepository(BaseRepository):
    """Repository for Deal records. Deals are read-only for the inbox."""

    def create(self, deal: DealDO) -> DealDO:
        """Insert a deal record."""
        try:
            self.conn.execute("""
                INSERT INTO deals (id, contact_id, title, value, probability, stage, next_step)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """, [
                deal.id,
                deal.contact_id,
                deal.title,
                deal.value,
                deal.probability,
                deal.stage,
                deal.next_step
            ])
            self.conn.commit()
            return deal
        except Exception as e:
            raise self._store_failure(f"create deal {deal.id}", e)

    def list_all(self) -> List[DealDO]:
        """List all deals."""
        try:
            results = self.conn.execute("""
                SELECT id, contact_id, title, value, probability, stage, next_step
                FROM deals
                ORDER BY id
            """).fetchall()
            return [
                DealDO(
                    id=row[0],
                    contact_id=row[1],
                    title=row[2],
                    value=row[3],
                    probability=row[4],
                    stage=row[5],
                    next_step=row[6]
                )
                for row in results
            ]
        except Exception as e:
            raise self._store_failure("list deals", e)
