"""
Flask session storage backend
"""
from typing import Optional

from flask import session

from .base import CartStorage


class FlaskSessionStorage(CartStorage):
    # Cart slots kept in the client's signed session cookie.
    # Must be used inside a request context.

    def get(self, key: str) -> Optional[str]:
        return session.get(key)

    def set(self, key: str, value: str) -> None:
        session[key] = value

    def remove(self, key: str) -> None:
        session.pop(key, None)
