"""Message repository for database operations."""

from typing import List
from .base import BaseRepository
from ..database_models.message import MessageDO

_COLUMNS = "id, channel, contact_id, thread_id, direction, body, status, sentiment, created_at"


def _row_to_message(row) -> MessageDO:
    return MessageDO(
        id=row[0],
        channel=row[1],
        contact_id=row[2],
        thread_id=row[3],
        direction=row[4],
        body=row[5],
        status=row[6],
        sentiment=row[7],
        created_at=row[8]
    )


class MessageRepository(BaseRepository):
    """Repository for the append-only message log."""

    def add(self, message: MessageDO) -> MessageDO:
        """
        Append a message to the log.

        Args:
            message: MessageDO instance

        Returns:
            The appended message

        Raises:
            StoreFailure: If the insert fails
        """
        try:
            self.conn.execute(f"""
                INSERT INTO messages (seq, {_COLUMNS})
                VALUES (nextval('messages_seq'), ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, [
                message.id,
                message.channel,
                message.contact_id,
                message.thread_id,
                message.direction,
                message.body,
                message.status,
                message.sentiment,
                message.created_at
            ])
            self.conn.commit()
            self.logger.debug(f"Appended message {message.id} to thread {message.thread_id}")
            return message
        except Exception as e:
            raise self._store_failure(f"append message {message.id}", e)

    def list_all(self) -> List[MessageDO]:
        """
        List the full message log.

        Returns:
            List of MessageDO instances in log (append) order
        """
        try:
            results = self.conn.execute(f"""
                SELECT {_COLUMNS}
                FROM messages
                ORDER BY seq
            """).fetchall()
            return [_row_to_message(row) for row in results]
        except Exception as e:
            raise self._store_failure("list messages", e)

    def list_by_thread(self, thread_id: str) -> List[MessageDO]:
        """
        List messages of one thread.

        Args:
            thread_id: Thread ID

        Returns:
            List of MessageDO instances in log order
        """
        try:
            results = self.conn.execute(f"""
                SELECT {_COLUMNS}
                FROM messages
                WHERE thread_id = ?
                ORDER BY seq
            """, [thread_id]).fetchall()
            return [_row_to_message(row) for row in results]
        except Exception as e:
            raise self._store_failure(f"list messages of thread {thread_id}", e)

    def count(self) -> int:
        """Number of messages in the log."""
        try:
            result = self.conn.execute("SELECT COUNT(*) FROM messages").fetchone()
            return result[0] if result else 0
        except Exception as e:
            raise self._store_failure("count messages", e)
