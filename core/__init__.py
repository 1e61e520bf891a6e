"""
Core package for the menu cart
Contains the ordering entry point
"""

from .menu_ordering import MenuOrdering

__all__ = [
    'MenuOrdering'
]
