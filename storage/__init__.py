"""
Storage package for the menu cart
Contains the cart storage port and its backends
"""

from .base import CartStorage, StorageError
from .memory import MemoryStorage
from .connection import DatabaseConnection
from .sqlite import SQLiteStorage
from .session import FlaskSessionStorage

__all__ = [
    'CartStorage', 'StorageError',
    'MemoryStorage', 'DatabaseConnection', 'SQLiteStorage', 'FlaskSessionStorage'
]
