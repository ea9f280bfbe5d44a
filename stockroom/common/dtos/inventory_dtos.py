"""Data Transfer Objects for inventory views."""

from dataclasses import dataclass

from stockroom.inventory_domain.domain.entities.stock_status import StockStatus


@dataclass
class InventoryViewItemDTO:
    """DTO for one row of an inventory listing, with its computed status attached."""

    item_id: int
    item_name: str
    stock: int
    capacity: int
    status: StockStatus

    def to_dict(self) -> dict:
        return {
            "id": self.item_id,
            "name": self.item_name,
            "stock": self.stock,
            "capacity": self.capacity,
            "status": self.status.value,
        }


@dataclass
class StockSummaryDTO:
    """DTO with per-status counters over the whole inventory."""

    total: int = 0
    out_of_stock: int = 0
    low_stock: int = 0
    overstocked: int = 0
    good: int = 0
