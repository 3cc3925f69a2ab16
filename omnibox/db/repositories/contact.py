"""Contact repository for database operations."""

import json
from typing import Optional, List
from .base import BaseRepository
from ..database_models.contact import ContactDO


def _row_to_contact(row) -> ContactDO:
    return ContactDO(
        id=row[0],
        name=row[1],
        handle=row[2],
        channel=row[3],
        email=row[4],
        phone=row[5],
        tags=json.loads(row[6]) if row[6] else [],
        created_at=row[7]
    )


class ContactRepository(BaseRepository):
    """Repository for Contact operations."""

    def create(self, contact: ContactDO) -> ContactDO:
        """
        Create a new contact record.

        Args:
            contact: ContactDO instance

        Returns:
            The created contact
        """
        try:
            self.conn.execute("""
                INSERT INTO contacts (id, name, handle, channel, email, phone, tags, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, [
                contact.id,
                contact.name,
                contact.handle,
                contact.channel,
                contact.email,
                contact.phone,
                json.dumps(contact.tags),
                contact.created_at
            ])
            self.conn.commit()
            self.logger.info(f"Created contact record: {contact.id}")
            return contact
        except Exception as e:
            raise self._store_failure(f"create contact {contact.id}", e)

    def get(self, contact_id: str) -> Optional[ContactDO]:
        """
        Get contact by ID.

        Args:
            contact_id: Contact ID

        Returns:
            ContactDO instance or None
        """
        try:
            result = self.conn.execute("""
                SELECT id, name, handle, channel, email, phone, tags, created_at
                FROM contacts
                WHERE id = ?
            """, [contact_id]).fetchone()
            return _row_to_contact(result) if result else None
        except Exception as e:
            raise self._store_failure(f"get contact {contact_id}", e)

    def list_all(self) -> List[ContactDO]:
        """
        List all contacts.

        Returns:
            List of ContactDO instances
        """
        try:
            results = self.conn.execute("""
                SELECT id, name, handle, channel, email, phone, tags, created_at
                FROM contacts
                ORDER BY name, id
            """).fetchall()
            return [_row_to_contact(row) for row in results]
        except Exception as e:
            raise self._store_failure("list contacts", e)
