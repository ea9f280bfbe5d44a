"""Price offer entity."""

from dataclasses import dataclass
from decimal import Decimal

from stockroom.common.exceptions.custom_exceptions import InvalidArgumentError


@dataclass(frozen=True)
class PriceOffer:
    """A distributor currently selling an item at a unit cost."""

    distributor_id: int
    distributor_name: str
    item_id: int
    unit_cost: Decimal

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.unit_cost < 0:
            raise InvalidArgumentError(
                f"Cost cannot be negative (distributor {self.distributor_id}, item {self.item_id})"
            )
