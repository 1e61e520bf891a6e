"""
SQLite connection management
"""
import sqlite3
from contextlib import contextmanager
from typing import Generator


class DatabaseConnection:
    # SQLite database holding cart storage slots

    def __init__(self, db_path: str = "cart.db"):
        # Database file path; the slot table is created on first use
        self.db_path = db_path
        self.init_database()

    def init_database(self):
        # Create the key/value table backing the cart storage port
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Cart_Storage (
                storage_key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            ''')

            conn.commit()

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        # Open a connection per operation and always close it
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
        finally:
            conn.close()
