"""Restock quote value object."""

from dataclasses import dataclass
from decimal import Decimal

from stockroom.common.utils.money_utils import format_money


@dataclass(frozen=True)  # Value objects are immutable
class RestockQuote:
    """Cheapest way to buy `quantity` units of an item. Advisory only, never persisted."""

    item_id: int
    quantity: int
    distributor_id: int
    distributor_name: str
    unit_cost: Decimal
    total_cost: Decimal

    def to_dict(self) -> dict:
        """Serializes the quote with costs as 2-digit strings so no float noise leaks out."""
        return {
            "item_id": self.item_id,
            "quantity": self.quantity,
            "distributor_id": self.distributor_id,
            "distributor_name": self.distributor_name,
            "unit_cost": format_money(self.unit_cost),
            "total_cost": format_money(self.total_cost),
        }
