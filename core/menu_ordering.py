"""
Main MenuOrdering class - wires POS configs, cart storage and carts together
"""
from typing import Dict, List, Any, Optional

from services.cart_service import CartService
from services.pos_config_service import POSConfigService
from storage.base import CartStorage


class MenuOrdering:
    # Entry point for menu ordering: one POS config per restaurant, one cart per storage

    def __init__(self, pos_config_service: Optional[POSConfigService] = None):
        self.pos_config_service = pos_config_service or POSConfigService()

    def open_cart(self, restaurant_id: str, storage: CartStorage) -> CartService:
        # Cart for the restaurant, loaded from the given storage with its current POS config
        config = self.pos_config_service.get_config(restaurant_id)
        return CartService(restaurant_id, storage, config)

    # === Cart methods ===
    def get_cart_details(self, restaurant_id: str, storage: CartStorage) -> Dict[str, Any]:
        return self.open_cart(restaurant_id, storage).get_cart_details()

    def add_to_cart(self, restaurant_id: str, storage: CartStorage, model: Dict[str, Any],
                    quantity: int = 1, options: Optional[List[Dict]] = None,
                    notes: Optional[str] = None) -> Dict[str, Any]:
        cart = self.open_cart(restaurant_id, storage)
        return cart.add_to_cart(model, quantity, options, notes)

    def update_quantity(self, restaurant_id: str, storage: CartStorage,
                        item_id: str, quantity: int) -> Dict[str, Any]:
        return self.open_cart(restaurant_id, storage).update_quantity(item_id, quantity)

    def remove_from_cart(self, restaurant_id: str, storage: CartStorage, item_id: str) -> Dict[str, Any]:
        return self.open_cart(restaurant_id, storage).remove_from_cart(item_id)

    def clear_cart(self, restaurant_id: str, storage: CartStorage) -> Dict[str, Any]:
        return self.open_cart(restaurant_id, storage).clear_cart()

    # === POS config methods ===
    def get_pos_config(self, restaurant_id: str) -> Dict[str, Any]:
        return {
            "success": True,
            "config": self.pos_config_service.get_config(restaurant_id).to_dict(),
            "capabilities": self.pos_config_service.get_capabilities(restaurant_id)
        }

    def update_pos_config(self, restaurant_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self.pos_config_service.update_config(restaurant_id, updates)
