# -*- coding: utf-8 -*-
"""
SQLite database access.

Provides a small connection wrapper returning dict-like rows and the schema
of the document store (user profiles plus one header table and one item
table per document kind).
"""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from utils.logger import get_logger

logger = get_logger(__name__)


class RowProxy:
    """
    A dict-like row proxy that supports both dict access and attribute access.
    """

    def __init__(self, data: Dict[str, Any], columns: Optional[List[str]] = None):
        self._data = data
        self._columns = columns or list(data.keys())

    def __getitem__(self, key):
        if isinstance(key, int):
            return self._data[self._columns[key]]
        return self._data[key]

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __contains__(self, key):
        return key in self._data

    def __len__(self):
        return len(self._data)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def keys(self):
        return self._data.keys()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self):
        return f"RowProxy({self._data})"


# Header columns shared by every document kind
_HEADER_COLUMNS = """
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                reference TEXT NOT NULL,
                date TEXT NOT NULL,
                client_name TEXT NOT NULL,
                client_email TEXT NOT NULL,
                client_phone TEXT,
                payment_terms TEXT NOT NULL,
                delivery_terms TEXT,
                additional_notes TEXT,
                template TEXT NOT NULL DEFAULT 'standard',
                status TEXT NOT NULL DEFAULT 'draft',
                total_amount TEXT NOT NULL DEFAULT '0',
                created_by TEXT NOT NULL,
                created_at TEXT,
                updated_at TEXT"""

# Extra header columns per kind
_KIND_COLUMNS = {
    "purchase_orders": "",
    "quotations": ",\n                valid_until TEXT",
    "sales_agreements": ",\n                start_date TEXT,\n                end_date TEXT",
}


class Database:
    """SQLite database wrapper."""

    def __init__(self, db_path: Optional[Path] = None):
        if db_path is None:
            from app.config import Config
            db_path = Config.DB_PATH

        self._db_path = Path(db_path)
        self._connection: Optional[sqlite3.Connection] = None
        # One connection is shared with the submission worker thread
        self._lock = threading.RLock()

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def connect(self) -> sqlite3.Connection:
        """Open the connection if needed and return it."""
        with self._lock:
            if self._connection is None:
                self._connection = sqlite3.connect(str(self._db_path), check_same_thread=False)
                self._connection.row_factory = self._dict_factory
                self._connection.execute("PRAGMA foreign_keys = ON")
                logger.debug(f"SQLite connection opened: {self._db_path}")
            return self._connection

    @staticmethod
    def _dict_factory(cursor, row):
        """Convert row to dictionary."""
        columns = [col[0] for col in cursor.description]
        return {col: row[idx] for idx, col in enumerate(columns)}

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._connection:
                self._connection.close()
                self._connection = None
                logger.info("SQLite connection closed")

    def execute(self, query: str, params: Optional[Tuple] = None) -> List[RowProxy]:
        """Execute a statement, commit and return any resulting rows."""
        with self._lock:
            conn = self.connect()
            cursor = conn.cursor()
            try:
                cursor.execute(query, params or ())
                conn.commit()
                if cursor.description:
                    columns = [col[0] for col in cursor.description]
                    return [RowProxy(row, columns) for row in cursor.fetchall()]
                return []
            except sqlite3.Error as e:
                conn.rollback()
                logger.error(f"SQLite execute error: {e}\nQuery: {query}")
                raise

    def fetch_one(self, query: str, params: Optional[Tuple] = None) -> Optional[RowProxy]:
        """Fetch single row."""
        with self._lock:
            cursor = self.connect().cursor()
            try:
                cursor.execute(query, params or ())
                row = cursor.fetchone()
                if row and cursor.description:
                    columns = [col[0] for col in cursor.description]
                    return RowProxy(row, columns)
                return None
            except sqlite3.Error as e:
                logger.error(f"SQLite fetch_one error: {e}\nQuery: {query}")
                raise

    def fetch_all(self, query: str, params: Optional[Tuple] = None) -> List[RowProxy]:
        """Fetch all rows."""
        with self._lock:
            cursor = self.connect().cursor()
            try:
                cursor.execute(query, params or ())
                if cursor.description:
                    columns = [col[0] for col in cursor.description]
                    return [RowProxy(row, columns) for row in cursor.fetchall()]
                return []
            except sqlite3.Error as e:
                logger.error(f"SQLite fetch_all error: {e}\nQuery: {query}")
                raise

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """
        Transaction context manager.

        The connection lock is held for the whole block, so statements from
        other threads wait until it commits or rolls back.

        Usage:
            with db.transaction() as cursor:
                cursor.execute(...)  # commit on success, rollback on error
        """
        with self._lock:
            conn = self.connect()
            cursor = conn.cursor()
            try:
                yield cursor
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"SQLite transaction error: {e}")
                raise
            finally:
                cursor.close()

    def initialize(self) -> None:
        """Create the schema if it does not exist."""
        logger.info(f"Initializing SQLite database at: {self._db_path}")
        with self.transaction() as cursor:
            self._create_tables(cursor)
        logger.info("SQLite database initialized successfully")

    def _create_tables(self, cursor) -> None:
        """Create all database tables."""
        # User profiles
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT UNIQUE NOT NULL,
                full_name TEXT,
                avatar_url TEXT,
                language TEXT NOT NULL DEFAULT 'en',
                created_at TEXT,
                updated_at TEXT
            )
        """)

        for table, extra_columns in _KIND_COLUMNS.items():
            cursor.execute(
                f"CREATE TABLE IF NOT EXISTS {table} ({_HEADER_COLUMNS}{extra_columns}\n            )"
            )
            # "purchase_orders" -> "purchase_order"
            singular = table[:-1]
            cursor.execute(f"""
                CREATE TABLE IF NOT EXISTS {singular}_items (
                    id TEXT PRIMARY KEY,
                    {singular}_id TEXT NOT NULL REFERENCES {table}(id) ON DELETE CASCADE,
                    position INTEGER NOT NULL DEFAULT 0,
                    name TEXT NOT NULL,
                    description TEXT,
                    quantity INTEGER NOT NULL,
                    unit_price TEXT NOT NULL,
                    created_at TEXT,
                    updated_at TEXT
                )
            """)
            cursor.execute(
                f"CREATE INDEX IF NOT EXISTS idx_{singular}_items_parent "
                f"ON {singular}_items({singular}_id)"
            )
            cursor.execute(f"CREATE INDEX IF NOT EXISTS idx_{table}_status ON {table}(status)")
