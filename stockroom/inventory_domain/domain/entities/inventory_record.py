"""Inventory record entity."""

from dataclasses import dataclass

from stockroom.common.exceptions.custom_exceptions import InvalidArgumentError


@dataclass(frozen=True)
class InventoryRecord:
    """Current stock and capacity of one stocked item."""

    item_id: int
    item_name: str
    stock: int
    capacity: int

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.stock < 0:
            raise InvalidArgumentError(f"Stock cannot be negative (item {self.item_id})")
        if self.capacity <= 0:
            raise InvalidArgumentError(f"Capacity must be greater than 0 (item {self.item_id})")
