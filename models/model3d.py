"""
Dish (3D model) data model
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class Model3D:
    """Menu dish backed by an uploaded 3D model"""
    id: str
    name: str
    price: Optional[float] = None
    thumbnail_url: Optional[str] = None
    category: Optional[str] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    ingredients: List[str] = field(default_factory=list)
    allergens: List[str] = field(default_factory=list)
    restaurant_id: Optional[str] = None

    @property
    def has_price(self) -> bool:
        return self.price is not None and self.price > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "thumbnailUrl": self.thumbnail_url,
            "category": self.category,
            "shortDescription": self.short_description,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "allergens": list(self.allergens),
            "restaurantId": self.restaurant_id
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Model3D":
        """Build from a catalog record (camelCase keys)"""
        price = data.get("price")
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            price=float(price) if price is not None else None,
            thumbnail_url=data.get("thumbnailUrl"),
            category=data.get("category"),
            short_description=data.get("shortDescription"),
            description=data.get("description"),
            ingredients=list(data.get("ingredients") or []),
            allergens=list(data.get("allergens") or []),
            restaurant_id=data.get("restaurantId")
        )
