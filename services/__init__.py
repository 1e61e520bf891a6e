"""
Services package for the menu cart
Contains business logic services
"""

from .pricing import calculate_totals, round_money
from .cart_service import CartService
from .pos_config_service import POSConfigService

__all__ = [
    'calculate_totals', 'round_money', 'CartService', 'POSConfigService'
]
