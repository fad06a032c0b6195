# Area: Storage
"""
drivethru_scorer._storage.database - Database Initialization
============================================================

Handles SQLite database initialization and connection management
for the score store. Every sqlite3 failure leaves this module as a
StorageError.
"""

import sqlite3
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import StorageError

logger = logging.getLogger("drivethru_scorer.storage.database")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def get_connection(db_path: str = "drivethru.db") -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = "drivethru.db") -> None:
    """
    Initialize the database with schema.

    Args:
        db_path: Path to the SQLite database file

    Raises:
        StorageError: If the schema cannot be applied
    """
    try:
        conn = get_connection(db_path)
    except sqlite3.Error as exc:
        raise StorageError("init_database", db_path, exc) from exc
    try:
        with open(SCHEMA_PATH, "r") as f:
            schema = f.read()
        conn.executescript(schema)
        conn.commit()
        logger.info(f"Database initialized at {db_path}")
    except sqlite3.Error as exc:
        raise StorageError("init_database", db_path, exc) from exc
    finally:
        conn.close()


def execute_in_transaction(
    db_path: str,
    statements: List[Tuple[str, tuple]],
    operation: str,
    key: str = "",
) -> None:
    """
    Run several write statements on one connection with a single commit.

    Either every statement is committed or none is.

    Args:
        db_path: Path to the SQLite database file
        statements: (query, params) pairs, run in order
        operation: Name reported in a StorageError
        key: Record key reported in a StorageError

    Raises:
        StorageError: On any sqlite3 failure, after rolling back
    """
    try:
        conn = get_connection(db_path)
    except sqlite3.Error as exc:
        raise StorageError(operation, key, exc) from exc
    try:
        for query, params in statements:
            conn.execute(query, params)
        conn.commit()
    except sqlite3.Error as exc:
        conn.rollback()
        raise StorageError(operation, key, exc) from exc
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for database repositories.

    Provides common database operations and connection management.
    """

    def __init__(self, db_path: str = "drivethru.db"):
        """
        Initialize repository.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        """Get a database connection."""
        return get_connection(self.db_path)

    def _execute(
        self,
        query: str,
        params: tuple = (),
        fetch: bool = False,
        operation: str = "execute",
        key: str = "",
    ) -> Optional[list]:
        """
        Execute a query.

        Args:
            query: SQL query string
            params: Query parameters
            fetch: If True, fetch and return results
            operation: Name reported in a StorageError
            key: Record key reported in a StorageError

        Returns:
            Query results if fetch=True, else None

        Raises:
            StorageError: On any sqlite3 failure
        """
        try:
            conn = self._get_conn()
        except sqlite3.Error as exc:
            raise StorageError(operation, key, exc) from exc
        try:
            cursor = conn.execute(query, params)
            if fetch:
                return [dict(row) for row in cursor.fetchall()]
            conn.commit()
            return None
        except sqlite3.Error as exc:
            raise StorageError(operation, key, exc) from exc
        finally:
            conn.close()

    def _execute_one(
        self, query: str, params: tuple = (), operation: str = "execute", key: str = ""
    ) -> Optional[dict]:
        """Execute query and return single result."""
        results = self._execute(query, params, fetch=True, operation=operation, key=key)
        return results[0] if results else None
