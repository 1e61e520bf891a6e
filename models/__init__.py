"""
Models package for the menu cart
Contains data models and type definitions
"""

from .model3d import Model3D
from .pos import RestaurantPOSConfig, POSFeatures, POSSettings, OpeningHours, PaymentMethod
from .cart import Cart, CartItem, CartItemOption

__all__ = [
    'Model3D',
    'RestaurantPOSConfig', 'POSFeatures', 'POSSettings', 'OpeningHours', 'PaymentMethod',
    'Cart', 'CartItem', 'CartItemOption'
]
