"""Base repository class."""

import duckdb
from ...errors import StoreFailure
from ...utils.logger import get_app_logger


class BaseRepository:
    """Base class for all repositories."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        """
        Initialize repository with database connection.

        Args:
            conn: DuckDB connection instance
        """
        self.conn = conn
        self.logger = get_app_logger("db")

    def _store_failure(self, action: str, error: Exception) -> StoreFailure:
        """Log a database error and wrap it for the caller to raise."""
        self.logger.error(f"Failed to {action}: {error}")
        return StoreFailure(f"Failed to {action}: {error}")
