"""
SQLite storage backend
"""
import sqlite3
from typing import Optional

from .base import CartStorage, StorageError
from .connection import DatabaseConnection


class SQLiteStorage(CartStorage):
    # Cart slots persisted in a local SQLite file (one row per key)

    def __init__(self, db_connection: DatabaseConnection):
        # DatabaseConnection instance injected
        self.db = db_connection

    def get(self, key: str) -> Optional[str]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            try:
                cursor.execute("SELECT value FROM Cart_Storage WHERE storage_key = ?", (key,))
                row = cursor.fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to read '{key}': {e}") from e

            return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            try:
                # Whole-value overwrite, last writer wins
                cursor.execute("""
                INSERT INTO Cart_Storage (storage_key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(storage_key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """, (key, value))

                conn.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to write '{key}': {e}") from e

    def remove(self, key: str) -> None:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            try:
                cursor.execute("DELETE FROM Cart_Storage WHERE storage_key = ?", (key,))
                conn.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to remove '{key}': {e}") from e
