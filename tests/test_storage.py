"""
Tests for cart storage backends
"""
import os
import tempfile
import unittest

from flask import Flask

from storage import DatabaseConnection, FlaskSessionStorage, MemoryStorage, SQLiteStorage


class StorageContract:
    """Checks every storage backend must pass"""

    def test_missing_key_is_none(self):
        self.assertIsNone(self.storage.get("cart_r1"))

    def test_set_then_get(self):
        self.storage.set("cart_r1", '{"items": []}')
        self.assertEqual(self.storage.get("cart_r1"), '{"items": []}')

    def test_set_overwrites(self):
        self.storage.set("cart_r1", "first")
        self.storage.set("cart_r1", "second")
        self.assertEqual(self.storage.get("cart_r1"), "second")

    def test_remove(self):
        self.storage.set("cart_r1", "value")
        self.storage.set("cart_session_id", "cart_1_abc")

        self.storage.remove("cart_r1")
        self.storage.remove("cart_r1")

        self.assertIsNone(self.storage.get("cart_r1"))
        self.assertEqual(self.storage.get("cart_session_id"), "cart_1_abc")


class TestMemoryStorage(StorageContract, unittest.TestCase):

    def setUp(self):
        self.storage = MemoryStorage()


class TestSQLiteStorage(StorageContract, unittest.TestCase):

    def setUp(self):
        """Set up test database"""
        self.test_db = tempfile.NamedTemporaryFile(delete=False, suffix='.db')
        self.test_db.close()
        self.storage = SQLiteStorage(DatabaseConnection(self.test_db.name))

    def tearDown(self):
        """Clean up test database"""
        os.unlink(self.test_db.name)

    def test_values_survive_new_connection(self):
        self.storage.set("cart_r1", "kept")

        reopened = SQLiteStorage(DatabaseConnection(self.test_db.name))

        self.assertEqual(reopened.get("cart_r1"), "kept")


class TestFlaskSessionStorage(StorageContract, unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.secret_key = "test"
        self.context = app.test_request_context()
        self.context.push()
        self.storage = FlaskSessionStorage()

    def tearDown(self):
        self.context.pop()


if __name__ == '__main__':
    unittest.main()
