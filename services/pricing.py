"""
Pricing - cart totals calculation
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Optional

from models.cart import CartItem
from models.pos import RestaurantPOSConfig

CENT = Decimal("0.01")


def round_money(amount: float) -> float:
    # Round half-up to 2 decimals on the decimal representation, so 2.675 -> 2.68
    return float(Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP))


def delivery_fee_for(config: Optional[RestaurantPOSConfig]) -> float:
    # Fee from the current POS settings; 0 when there is no config or ordering is off
    if config is None or not config.can_order:
        return 0.0
    return float(config.settings.delivery_fee or 0)


def calculate_totals(items: Iterable[CartItem],
                     config: Optional[RestaurantPOSConfig]) -> Dict[str, float]:
    """Recompute cart money fields from scratch.

    Prices are tax-inclusive, so ``tax`` is always 0. The delivery fee is
    applied even when there are no items.
    """
    subtotal = round_money(sum(item.line_total for item in items))
    delivery_fee = delivery_fee_for(config)

    return {
        "subtotal": subtotal,
        "tax": 0.0,
        "delivery_fee": delivery_fee,
        "total": round_money(subtotal + delivery_fee)
    }
