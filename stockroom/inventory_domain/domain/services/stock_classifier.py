# stockroom/inventory_domain/domain/services/stock_classifier.py
"""
Stock status classification.

Every listing and report derives its status from these functions.
"""

from stockroom.common.exceptions.custom_exceptions import InvalidArgumentError
from stockroom.inventory_domain.domain.entities.stock_status import InventoryFilter, StockStatus

# Low stock is strictly below 35% of capacity:
# stock < capacity * 0.35  <=>  stock * 100 < capacity * 35
LOW_STOCK_PERCENT = 35


def _validate(stock: int, capacity: int) -> None:
    for name, value in (("stock", stock), ("capacity", capacity)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if capacity <= 0:
        raise InvalidArgumentError(f"Capacity must be greater than 0, got {capacity}")
    if stock < 0:
        raise InvalidArgumentError(f"Stock cannot be negative, got {stock}")


def _below_low_stock_threshold(stock: int, capacity: int) -> bool:
    return stock * 100 < capacity * LOW_STOCK_PERCENT


def classify(stock: int, capacity: int) -> StockStatus:
    """
    Maps a (stock, capacity) pair to its StockStatus.

    First match wins:
      1. stock == 0                  -> OUT_OF_STOCK
      2. stock > capacity            -> OVERSTOCKED
      3. stock < capacity * 0.35     -> LOW_STOCK
      4. otherwise                   -> GOOD

    Raises:
        InvalidArgumentError: capacity <= 0, negative stock or non-integer input.
    """
    _validate(stock, capacity)
    if stock == 0:
        return StockStatus.OUT_OF_STOCK
    if stock > capacity:
        return StockStatus.OVERSTOCKED
    if _below_low_stock_threshold(stock, capacity):
        return StockStatus.LOW_STOCK
    return StockStatus.GOOD


def is_out_of_stock(stock: int, capacity: int) -> bool:
    _validate(stock, capacity)
    return stock == 0


def is_low_stock(stock: int, capacity: int) -> bool:
    _validate(stock, capacity)
    # stock > 0 already implies stock <= capacity once below the threshold
    return stock > 0 and _below_low_stock_threshold(stock, capacity)


def is_overstocked(stock: int, capacity: int) -> bool:
    _validate(stock, capacity)
    return stock > capacity


_FILTER_PREDICATES = {
    InventoryFilter.OUT_OF_STOCK: is_out_of_stock,
    InventoryFilter.LOW_STOCK: is_low_stock,
    InventoryFilter.OVERSTOCKED: is_overstocked,
}


def matches_filter(inventory_filter: InventoryFilter, stock: int, capacity: int) -> bool:
    """Returns True when the pair belongs to the given filtered view."""
    if inventory_filter is InventoryFilter.ALL:
        _validate(stock, capacity)
        return True
    return _FILTER_PREDICATES[inventory_filter](stock, capacity)
