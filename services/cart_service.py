"""
Cart service - handles cart operations
"""
import json
import logging
import random
import string
import time
from dataclasses import replace
from typing import Dict, List, Any, Optional, Union

from models.cart import Cart, CartItem, CartItemOption, options_key
from models.model3d import Model3D
from models.pos import RestaurantPOSConfig
from storage.base import CartStorage, StorageError
from .pricing import calculate_totals

logger = logging.getLogger(__name__)

SESSION_KEY = "cart_session_id"

ORDERING_DISABLED = "Ordering is not enabled for this restaurant"
MISSING_PRICE = "This dish has no price set"
INVALID_QUANTITY = "Quantity must be a whole number of at least 1"
INVALID_DISH = "The dish record is invalid"

OptionsInput = Optional[List[Union[CartItemOption, Dict[str, Any]]]]


def cart_key(restaurant_id: str) -> str:
    return f"cart_{restaurant_id}"


def generate_session_id() -> str:
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"cart_{int(time.time() * 1000)}_{suffix}"


def normalize_options(options: OptionsInput) -> Optional[List[CartItemOption]]:
    if options is None:
        return None
    return [o if isinstance(o, CartItemOption) else CartItemOption.from_dict(o) for o in options]


class CartService:
    # Client-side cart for one restaurant: mutations, totals and persistence

    def __init__(self, restaurant_id: str, storage: CartStorage,
                 config: Optional[RestaurantPOSConfig] = None):
        # Storage port and POS config are injected; the persisted cart is loaded right away
        self.restaurant_id = restaurant_id
        self.storage = storage
        self.config = config
        self.error: Optional[str] = None
        self.is_loading = False
        self.session_id = self._resolve_session_id()
        self.cart = self.load_cart()

    # === Session and persistence ===
    def _resolve_session_id(self) -> str:
        # Reuse the browser-wide session id, generating and storing one on first use
        try:
            session_id = self.storage.get(SESSION_KEY)
            if session_id:
                return session_id
            session_id = generate_session_id()
            self.storage.set(SESSION_KEY, session_id)
            return session_id
        except StorageError:
            logger.warning("Cart session id could not be persisted", exc_info=True)
            return generate_session_id()

    def _empty_cart(self) -> Cart:
        return Cart(restaurant_id=self.restaurant_id, session_id=self.session_id)

    def load_cart(self) -> Cart:
        # Stored cart for the current restaurant, or a fresh empty one
        try:
            stored = self.storage.get(cart_key(self.restaurant_id))
            if not stored:
                return self._empty_cart()

            cart = Cart.from_dict(json.loads(stored))
            if cart.restaurant_id != self.restaurant_id:
                logger.info("Discarding stored cart of restaurant %s", cart.restaurant_id)
                return self._empty_cart()
            return cart

        except (StorageError, ValueError, KeyError, TypeError, AttributeError):
            logger.exception("Failed to load cart for restaurant %s", self.restaurant_id)
            return self._empty_cart()

    def save_cart(self, cart: Cart) -> bool:
        # Best-effort write of the whole cart; failures are logged and reported, not retried
        try:
            self.storage.set(cart_key(cart.restaurant_id), json.dumps(cart.to_dict()))
            return True
        except StorageError:
            logger.exception("Failed to save cart for restaurant %s", cart.restaurant_id)
            self.error = "The cart could not be saved"
            return False

    def _commit(self, items: List[CartItem], message: str) -> Dict[str, Any]:
        # Recompute totals from scratch, swap in the new cart and persist it
        totals = calculate_totals(items, self.config)
        self.cart = Cart(
            restaurant_id=self.restaurant_id,
            session_id=self.cart.session_id,
            items=items,
            **totals
        )

        if not self.save_cart(self.cart):
            return {
                "success": False,
                "error": self.error,
                "cart": self.cart.to_dict()
            }

        return {
            "success": True,
            "cart": self.cart.to_dict(),
            "message": message
        }

    def _fail(self, error: str) -> Dict[str, Any]:
        self.error = error
        return {
            "success": False,
            "error": error
        }

    # === Context ===
    def set_config(self, config: Optional[RestaurantPOSConfig]):
        # New POS config applies from the next mutation on
        self.config = config

    def switch_restaurant(self, restaurant_id: str):
        # Changing restaurant replaces the cart with that restaurant's stored one
        self.restaurant_id = restaurant_id
        self.error = None
        self.cart = self.load_cart()

    def clear_error(self):
        self.error = None

    # === Mutations ===
    def add_to_cart(self, model: Union[Model3D, Dict[str, Any]], quantity: int = 1,
                    options: OptionsInput = None, notes: Optional[str] = None) -> Dict[str, Any]:
        # Add a dish, merging into an existing line with the same dish and options
        if isinstance(model, dict):
            try:
                model = Model3D.from_dict(model)
            except (KeyError, TypeError, ValueError):
                return self._fail(INVALID_DISH)

        if self.config is None or not self.config.can_order:
            return self._fail(ORDERING_DISABLED)

        if not model.has_price:
            return self._fail(MISSING_PRICE)

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            return self._fail(INVALID_QUANTITY)

        self.is_loading = True
        self.error = None

        try:
            options = normalize_options(options)
            key = (model.id, options_key(options))
            items = list(self.cart.items)

            for index, item in enumerate(items):
                if item.merge_key() == key:
                    items[index] = replace(
                        item,
                        quantity=item.quantity + quantity,
                        notes=notes if notes else item.notes
                    )
                    break
            else:
                # Price and dish details are frozen at add time
                items.append(CartItem(
                    id=self._new_item_id(model.id),
                    model_id=model.id,
                    name=model.name,
                    price=model.price,
                    quantity=quantity,
                    image_url=model.thumbnail_url,
                    category=model.category,
                    short_description=model.short_description,
                    allergens=list(model.allergens),
                    ingredients=list(model.ingredients),
                    options=options,
                    notes=notes
                ))

            return self._commit(items, f"{model.name} was added to the cart.")

        except Exception:
            logger.exception("Failed to add %s to the cart", model.id)
            return self._fail("The dish could not be added to the cart")

        finally:
            self.is_loading = False

    def remove_from_cart(self, item_id: str) -> Dict[str, Any]:
        # Drop a line; removing an unknown line is a no-op
        try:
            items = [item for item in self.cart.items if item.id != item_id]
            message = ("The item was removed from the cart."
                       if len(items) != len(self.cart.items) else "The item is not in the cart.")
            return self._commit(items, message)

        except Exception:
            logger.exception("Failed to remove %s from the cart", item_id)
            return self._fail("The item could not be removed from the cart")

    def update_quantity(self, item_id: str, quantity: int) -> Dict[str, Any]:
        # Set a line's quantity; zero or less removes the line
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return self._fail(INVALID_QUANTITY)

        if quantity <= 0:
            return self.remove_from_cart(item_id)

        try:
            items = [
                replace(item, quantity=quantity) if item.id == item_id else item
                for item in self.cart.items
            ]
            return self._commit(items, f"Quantity changed to {quantity}.")

        except Exception:
            logger.exception("Failed to update quantity of %s", item_id)
            return self._fail("The quantity could not be changed")

    def clear_cart(self) -> Dict[str, Any]:
        # Reset to an empty cart and erase the persisted copy
        self.cart = self._empty_cart()

        try:
            self.storage.remove(cart_key(self.restaurant_id))
        except StorageError:
            logger.exception("Failed to erase stored cart for restaurant %s", self.restaurant_id)
            return self._fail("The stored cart could not be erased")

        return {
            "success": True,
            "cart": self.cart.to_dict(),
            "message": "The cart was emptied."
        }

    def _new_item_id(self, model_id: str) -> str:
        base = f"{model_id}_{int(time.time() * 1000)}"
        item_id = base
        suffix = 1
        while self.cart.find_item(item_id) is not None:
            item_id = f"{base}_{suffix}"
            suffix += 1
        return item_id

    # === Queries ===
    def get_item_count(self) -> int:
        return self.cart.item_count

    def _matching_items(self, model_id: str, options: OptionsInput) -> List[CartItem]:
        # Without options any variant of the dish matches; with options only the exact line
        if options is None:
            return [item for item in self.cart.items if item.model_id == model_id]

        key = (model_id, options_key(normalize_options(options)))
        return [item for item in self.cart.items if item.merge_key() == key]

    def is_in_cart(self, model_id: str, options: OptionsInput = None) -> bool:
        return bool(self._matching_items(model_id, options))

    def get_item_quantity(self, model_id: str, options: OptionsInput = None) -> int:
        # Quantity of the first matching line
        matches = self._matching_items(model_id, options)
        return matches[0].quantity if matches else 0

    @property
    def is_empty(self) -> bool:
        return not self.cart.items

    @property
    def is_enabled(self) -> bool:
        return self.config is not None and self.config.can_order

    def get_cart_details(self) -> Dict[str, Any]:
        # Cart contents plus the derived values the UI renders
        count = self.get_item_count()
        return {
            "success": True,
            "cart": self.cart.to_dict(),
            "item_count": count,
            "is_empty": self.is_empty,
            "is_enabled": self.is_enabled,
            "error": self.error,
            "message": f"There are {count} items in the cart." if count else "The cart is empty."
        }
