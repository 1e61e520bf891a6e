"""
Cart related data models
"""
import json
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


@dataclass
class CartItemOption:
    """Named add-on chosen for a cart line, priced per unit"""
    id: str
    name: str
    value: str = ""
    price: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "price": self.price
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartItemOption":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            value=data.get("value", ""),
            price=float(data.get("price") or 0)
        )


def options_key(options: Optional[List[CartItemOption]]) -> str:
    # Serialized option set used to decide whether two additions are the same line.
    # None and an empty list both mean "no options".
    return json.dumps([option.to_dict() for option in options or []], sort_keys=True)


@dataclass
class CartItem:
    """Cart line data model"""
    id: str
    model_id: str
    name: str
    price: float
    quantity: int
    image_url: Optional[str] = None
    category: Optional[str] = None
    short_description: Optional[str] = None
    allergens: List[str] = field(default_factory=list)
    ingredients: List[str] = field(default_factory=list)
    options: Optional[List[CartItemOption]] = None
    notes: Optional[str] = None

    @property
    def options_total(self) -> float:
        return sum(option.price for option in self.options or [])

    @property
    def line_total(self) -> float:
        return (self.price + self.options_total) * self.quantity

    def merge_key(self):
        return self.model_id, options_key(self.options)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "id": self.id,
            "modelId": self.model_id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "imageUrl": self.image_url,
            "category": self.category,
            "shortDescription": self.short_description,
            "allergens": list(self.allergens),
            "ingredients": list(self.ingredients),
            "notes": self.notes
        }
        if self.options is not None:
            data["options"] = [option.to_dict() for option in self.options]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartItem":
        options = data.get("options")
        return cls(
            id=data["id"],
            model_id=data["modelId"],
            name=data.get("name", ""),
            price=float(data["price"]),
            quantity=int(data["quantity"]),
            image_url=data.get("imageUrl"),
            category=data.get("category"),
            short_description=data.get("shortDescription"),
            allergens=list(data.get("allergens") or []),
            ingredients=list(data.get("ingredients") or []),
            options=[CartItemOption.from_dict(o) for o in options] if options is not None else None,
            notes=data.get("notes")
        )


@dataclass
class Cart:
    """Shopping cart scoped to a single restaurant"""
    restaurant_id: str
    session_id: str
    items: List[CartItem] = field(default_factory=list)
    subtotal: float = 0.0
    tax: float = 0.0
    delivery_fee: float = 0.0
    total: float = 0.0

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def find_item(self, item_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted cart layout"""
        return {
            "items": [item.to_dict() for item in self.items],
            "subtotal": self.subtotal,
            "total": self.total,
            "tax": self.tax,
            "deliveryFee": self.delivery_fee,
            "restaurantId": self.restaurant_id,
            "sessionId": self.session_id
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cart":
        return cls(
            restaurant_id=data["restaurantId"],
            session_id=data.get("sessionId", ""),
            items=[CartItem.from_dict(item) for item in data.get("items") or []],
            subtotal=float(data.get("subtotal") or 0),
            tax=float(data.get("tax") or 0),
            delivery_fee=float(data.get("deliveryFee") or 0),
            total=float(data.get("total") or 0)
        )
