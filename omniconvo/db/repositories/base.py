"""Base repository class."""

from datetime import datetime, timezone

import duckdb
from ...utils.logger import get_app_logger


def utcnow() -> datetime:
    """Current UTC time without tzinfo, as stored in TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseRepository:
    """Base class for all repositories."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        """
        Initialize repository with database connection.

        Args:
            conn: DuckDB connection instance
        """
        self.conn = conn
        self.logger = get_app_logger()
