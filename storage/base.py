"""
Storage port for persisted cart state
"""
from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Raised when a storage backend cannot read or write a slot"""


class CartStorage(ABC):
    # Key/value slots holding serialized carts and the cart session id

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        # Stored string for the key, or None when the slot is empty
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        # Removing an empty slot is not an error
        raise NotImplementedError
