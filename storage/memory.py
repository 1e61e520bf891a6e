"""
In-memory storage backend
"""
from typing import Dict, Optional

from .base import CartStorage


class MemoryStorage(CartStorage):
    # Process-local slots, used by tests and the single-process dev server

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        self.slots[key] = value

    def remove(self, key: str) -> None:
        self.slots.pop(key, None)
