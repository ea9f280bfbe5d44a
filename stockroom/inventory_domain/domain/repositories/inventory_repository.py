# stockroom/inventory_domain/domain/repositories/inventory_repository.py
"""Inventory repository interfaces."""
from abc import ABC, abstractmethod
from typing import Optional

from stockroom.inventory_domain.domain.entities.inventory_record import InventoryRecord


class IInventoryReader(ABC):
    """Read-only view over stock records, all the classifier-facing code needs."""

    @abstractmethod
    def get_inventory_records(self) -> list[InventoryRecord]:
        """Retrieves every inventory record joined with its item name."""
        pass

    @abstractmethod
    def get_inventory_record(self, item_id: int) -> Optional[InventoryRecord]:
        """Retrieves the inventory record of one item, None when the item is not stocked."""
        pass


class IInventoryRepository(IInventoryReader):

    @abstractmethod
    def create_tables(self) -> None:
        """Creates the inventory table if it does not exist."""
        pass

    @abstractmethod
    def add_inventory_record(self, item_id: int, stock: int, capacity: int) -> None:
        """Adds the inventory record of an item. One record per item."""
        pass

    @abstractmethod
    def update_inventory_record(self, item_id: int, stock: Optional[int] = None, capacity: Optional[int] = None) -> None:
        """Updates stock and/or capacity of an existing record."""
        pass

    @abstractmethod
    def delete_inventory_record(self, item_id: int) -> None:
        """Removes the inventory record of an item."""
        pass
