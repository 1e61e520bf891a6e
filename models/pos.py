"""
POS (point of sale) configuration data models
"""
from dataclasses import dataclass, field
from typing import List, Dict, Any
from enum import Enum


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    ONLINE = "online"


# camelCase key used in stored/transported config for each snake_case field
FEATURE_KEYS = {
    "ordering": "ordering",
    "payment": "payment",
    "delivery": "delivery",
    "takeaway": "takeaway",
    "dine_in": "dineIn",
    "customization": "customization"
}

SETTING_KEYS = {
    "currency": "currency",
    "tax_rate": "taxRate",
    "delivery_fee": "deliveryFee",
    "minimum_order": "minimumOrder",
    "estimated_prep_time": "estimatedPrepTime",
    "accepts_reservations": "acceptsReservations"
}


def as_flag(name: str, value: Any) -> bool:
    # Only JSON booleans are accepted as flags
    if not isinstance(value, bool):
        raise TypeError(f"POS flag '{name}' must be true or false")
    return value


@dataclass
class POSFeatures:
    """Feature flags of a restaurant's POS"""
    ordering: bool = True
    payment: bool = False
    delivery: bool = False
    takeaway: bool = True
    dine_in: bool = True
    customization: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, name) for name, key in FEATURE_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "POSFeatures":
        values = {}
        for name, key in FEATURE_KEYS.items():
            if key in data:
                values[name] = as_flag(key, data[key])
            elif name in data:
                values[name] = as_flag(name, data[name])
        return cls(**values)


@dataclass
class POSSettings:
    """Commercial settings of a restaurant's POS"""
    currency: str = "EUR"
    tax_rate: float = 0.20  # informational, menu prices already include tax
    delivery_fee: float = 0.0
    minimum_order: float = 0.0
    estimated_prep_time: int = 20  # minutes
    accepts_reservations: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, name) for name, key in SETTING_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "POSSettings":
        values = {}
        for name, key in SETTING_KEYS.items():
            if key in data:
                values[name] = data[key]
            elif name in data:
                values[name] = data[name]
        settings = cls(**values)
        settings.tax_rate = float(settings.tax_rate)
        settings.delivery_fee = float(settings.delivery_fee or 0)
        settings.minimum_order = float(settings.minimum_order or 0)
        settings.estimated_prep_time = int(settings.estimated_prep_time)
        if settings.delivery_fee < 0 or settings.minimum_order < 0:
            raise ValueError("Delivery fee and minimum order cannot be negative")
        return settings


@dataclass
class OpeningHours:
    """Opening hours for a single day"""
    open: str = "09:00"
    close: str = "22:00"
    closed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"open": self.open, "close": self.close, "closed": self.closed}


def default_opening_hours() -> Dict[str, OpeningHours]:
    return {
        "monday": OpeningHours("09:00", "22:00"),
        "tuesday": OpeningHours("09:00", "22:00"),
        "wednesday": OpeningHours("09:00", "22:00"),
        "thursday": OpeningHours("09:00", "22:00"),
        "friday": OpeningHours("09:00", "23:00"),
        "saturday": OpeningHours("09:00", "23:00"),
        "sunday": OpeningHours("10:00", "21:00")
    }


@dataclass
class RestaurantPOSConfig:
    """Per-restaurant POS configuration"""
    restaurant_id: str
    enabled: bool = True
    features: POSFeatures = field(default_factory=POSFeatures)
    settings: POSSettings = field(default_factory=POSSettings)
    payment_methods: List[PaymentMethod] = field(default_factory=lambda: [PaymentMethod.CASH])
    opening_hours: Dict[str, OpeningHours] = field(default_factory=default_opening_hours)

    @property
    def can_order(self) -> bool:
        return self.enabled and self.features.ordering

    @property
    def can_pay(self) -> bool:
        return self.enabled and self.features.payment

    @property
    def can_deliver(self) -> bool:
        return self.enabled and self.features.delivery

    @property
    def can_takeaway(self) -> bool:
        return self.enabled and self.features.takeaway

    @property
    def can_dine_in(self) -> bool:
        return self.enabled and self.features.dine_in

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "restaurantId": self.restaurant_id,
            "enabled": self.enabled,
            "features": self.features.to_dict(),
            "settings": self.settings.to_dict(),
            "paymentMethods": [method.value for method in self.payment_methods],
            "openingHours": {day: hours.to_dict() for day, hours in self.opening_hours.items()}
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RestaurantPOSConfig":
        config = cls(
            restaurant_id=str(data.get("restaurantId", data.get("restaurant_id", ""))),
            enabled=as_flag("enabled", data.get("enabled", True)),
            features=POSFeatures.from_dict(data.get("features") or {}),
            settings=POSSettings.from_dict(data.get("settings") or {})
        )
        if "paymentMethods" in data:
            config.payment_methods = [PaymentMethod(value) for value in data["paymentMethods"]]
        if "openingHours" in data:
            config.opening_hours = {
                day: OpeningHours(**hours) for day, hours in data["openingHours"].items()
            }
        return config

