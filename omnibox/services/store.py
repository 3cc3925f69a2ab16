"""Inbox store - the DuckDB-backed message/contact/task repository."""

import uuid
from typing import List, Optional, Union
from datetime import datetime

from ..db import (
    DatabaseConnection,
    ContactRepository,
    MessageRepository,
    TaskRepository,
    DealRepository,
    CallRepository,
)
from ..db.database_models import (
    ContactDO,
    MessageDO,
    DashboardSnapshot,
    DIRECTIONS,
    STATUSES,
    SENTIMENTS,
)
from ..errors import ValidationError
from ..utils.logger import get_app_logger
from ..utils.timestamps import normalize_timestamp


class InboxStore:
    """
    Append-only message log plus contact, task, deal and call collections.

    Messages are never updated or deleted; every read returns a fresh
    snapshot so derived views can be recomputed from scratch.
    """

    def __init__(self, db: DatabaseConnection):
        """
        Initialize the store on an open database connection.

        Args:
            db: DatabaseConnection instance
        """
        self.db = db
        self.logger = get_app_logger("store")
        self.contacts = ContactRepository(db.conn)
        self.messages = MessageRepository(db.conn)
        self.tasks = TaskRepository(db.conn)
        self.deals = DealRepository(db.conn)
        self.calls = CallRepository(db.conn)

    def get_dashboard_snapshot(self) -> DashboardSnapshot:
        """Read every collection into one immutable snapshot."""
        return DashboardSnapshot(
            contacts=self.contacts.list_all(),
            messages=self.messages.list_all(),
            calls=self.calls.list_all(),
            deals=self.deals.list_all(),
            tasks=self.tasks.list_all()
        )

    def get_thread_history(self, thread_id: str) -> List[MessageDO]:
        """Messages of one thread in log order."""
        return self.messages.list_by_thread(thread_id)

    def validate_thread(
        self,
        channel: str,
        contact_id: str,
        thread_id: str,
        history: Optional[List[MessageDO]] = None
    ) -> None:
        """
        Check that a message may be added to a thread.

        The contact must exist, and an existing thread must already belong
        to the same channel and contact.

        Args:
            channel: Channel of the new message
            contact_id: Contact of the new message
            thread_id: Target thread
            history: Thread history if the caller already fetched it

        Raises:
            ValidationError: If the contact is unknown or the thread belongs elsewhere
        """
        channel = (channel or "").strip().lower()
        if not thread_id:
            raise ValidationError("threadId is required")
        if not contact_id:
            raise ValidationError("contactId is required")
        if self.contacts.get(contact_id) is None:
            raise ValidationError(f"Unknown contact: {contact_id}")

        if history is None:
            history = self.get_thread_history(thread_id)
        if history:
            first = history[0]
            if first.channel != channel or first.contact_id != contact_id:
                raise ValidationError(
                    f"Thread {thread_id} belongs to contact {first.contact_id} "
                    f"on channel {first.channel}"
                )

    def append_message(
        self,
        channel: str,
        contact_id: str,
        thread_id: str,
        direction: str,
        body: str,
        status: str,
        sentiment: str,
        created_at: Optional[Union[str, datetime]] = None
    ) -> MessageDO:
        """
        Validate and append a message to the log.

        Args:
            channel: Channel identifier
            contact_id: Contact ID
            thread_id: Thread ID
            direction: inbound or outbound
            body: Message text
            status: Message status
            sentiment: positive, neutral or negative
            created_at: Timestamp, defaults to now; normalized to canonical UTC

        Returns:
            The appended message

        Raises:
            ValidationError: On invalid fields or a thread invariant violation
            StoreFailure: If the write fails
        """
        if direction not in DIRECTIONS:
            raise ValidationError(f"Invalid direction: {direction}")
        if status not in STATUSES:
            raise ValidationError(f"Invalid status: {status}")
        if sentiment not in SENTIMENTS:
            raise ValidationError(f"Invalid sentiment: {sentiment}")
        if not body or not body.strip():
            raise ValidationError("message body required")

        channel = (channel or "").strip().lower()
        self.validate_thread(channel, contact_id, thread_id)

        message = MessageDO(
            id=f"msg_{uuid.uuid4().hex[:12]}",
            channel=channel,
            contact_id=contact_id,
            thread_id=thread_id,
            direction=direction,
            body=body,
            status=status,
            sentiment=sentiment,
            created_at=normalize_timestamp(created_at)
        )
        self.messages.add(message)
        self.logger.info(f"Stored {direction} message {message.id} in thread {thread_id}")
        return message

    def add_contact(self, contact: ContactDO) -> ContactDO:
        """Register a contact; its created_at is normalized."""
        contact = ContactDO(
            id=contact.id,
            name=contact.name,
            handle=contact.handle,
            channel=contact.channel,
            email=contact.email,
            phone=contact.phone,
            tags=list(contact.tags),
            created_at=normalize_timestamp(contact.created_at)
        )
        return self.contacts.create(contact)

    def is_empty(self) -> bool:
        """True when no contacts have been stored yet."""
        return not self.contacts.list_all()
