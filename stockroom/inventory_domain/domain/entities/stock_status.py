"""Stock status and inventory filter enumerations."""

from enum import Enum


class StockStatus(str, Enum):
    """Derived health of an inventory record. Computed on every read, never stored."""

    OUT_OF_STOCK = "OutOfStock"
    OVERSTOCKED = "Overstocked"
    LOW_STOCK = "LowStock"
    GOOD = "Good"

    @property
    def label(self) -> str:
        """Human-readable label used in tables and alerts."""
        return _LABELS[self]


_LABELS = {
    StockStatus.OUT_OF_STOCK: "Out of Stock",
    StockStatus.OVERSTOCKED: "Overstocked",
    StockStatus.LOW_STOCK: "Low Stock",
    StockStatus.GOOD: "Good",
}


class InventoryFilter(str, Enum):
    """Filtered inventory views."""

    ALL = "all"
    OUT_OF_STOCK = "out-of-stock"
    LOW_STOCK = "low-stock"
    OVERSTOCKED = "overstocked"
