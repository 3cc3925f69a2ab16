"""Database connection and schema management."""

import duckdb
from typing import Optional
from pathlib import Path
from ..errors import StoreFailure
from ..utils.logger import get_app_logger


class DatabaseConnection:
    """DuckDB connection manager."""

    def __init__(self, db_path: str = "./data/omnibox.db"):
        """
        Initialize database connection.

        Args:
            db_path: Path to DuckDB database file, or ":memory:"
        """
        self.db_path = db_path
        self.logger = get_app_logger("db")
        self.conn: Optional[duckdb.DuckDBPyConnection] = None

        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self._connect()
        self._init_schema()

    def _connect(self):
        """Connect to DuckDB database."""
        try:
            self.conn = duckdb.connect(self.db_path)
            self.logger.info(f"Connected to DuckDB at {self.db_path}")
        except Exception as e:
            self.logger.error(f"Failed to connect to DuckDB: {e}")
            raise StoreFailure(f"Failed to connect to store: {e}")

    def _init_schema(self):
        """Initialize database schema."""
        try:
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS contacts (
                    id VARCHAR PRIMARY KEY,
                    name VARCHAR NOT NULL,
                    handle VARCHAR NOT NULL,
                    channel VARCHAR NOT NULL,
                    email VARCHAR,
                    phone VARCHAR,
                    tags JSON,
                    created_at VARCHAR
                )
            """)

            # Messages are append-only; created_at holds canonical ISO strings
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS messages (
                    seq BIGINT PRIMARY KEY,
                    id VARCHAR NOT NULL UNIQUE,
                    channel VARCHAR NOT NULL,
                    contact_id VARCHAR NOT NULL,
                    thread_id VARCHAR NOT NULL,
                    direction VARCHAR NOT NULL,
                    body VARCHAR NOT NULL,
                    status VARCHAR NOT NULL,
                    sentiment VARCHAR NOT NULL,
                    created_at VARCHAR NOT NULL
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS tasks (
                    id VARCHAR PRIMARY KEY,
                    description VARCHAR NOT NULL,
                    status VARCHAR NOT NULL,
                    priority VARCHAR NOT NULL,
                    contact_id VARCHAR,
                    message_id VARCHAR,
                    deal_id VARCHAR,
                    due_at VARCHAR,
                    created_at VARCHAR,
                    completed_at VARCHAR
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS deals (
                    id VARCHAR PRIMARY KEY,
                    contact_id VARCHAR NOT NULL,
                    title VARCHAR NOT NULL,
                    value DOUBLE NOT NULL,
                    probability DOUBLE NOT NULL,
                    stage VARCHAR NOT NULL,
                    next_step VARCHAR
                )
            """)

            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS calls (
                    id VARCHAR PRIMARY KEY,
                    contact_id VARCHAR NOT NULL,
                    recorded_at VARCHAR NOT NULL,
                    duration_seconds INTEGER NOT NULL,
                    summary VARCHAR NOT NULL,
                    follow_ups JSON
                )
            """)

            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_messages_thread ON messages(thread_id)")
            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_messages_contact ON messages(contact_id)")

            # Log order of the append-only message table
            self.conn.execute("CREATE SEQUENCE IF NOT EXISTS messages_seq START 1")

            self.logger.info("Database schema initialized successfully")

        except Exception as e:
            self.logger.error(f"Failed to initialize database schema: {e}")
            raise StoreFailure(f"Failed to initialize store schema: {e}")

    def close(self):
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
            self.logger.info("Database connection closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
