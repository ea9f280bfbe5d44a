# stockroom/inventory_domain/application/inventory_service.py
"""Application service for inventory listings and stock health."""

import logging
from typing import Optional

from stockroom.common.dtos.inventory_dtos import InventoryViewItemDTO, StockSummaryDTO
from stockroom.common.exceptions.custom_exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ReadOnlySourceError,
)
from stockroom.inventory_domain.domain.entities.inventory_record import InventoryRecord
from stockroom.inventory_domain.domain.entities.stock_status import InventoryFilter, StockStatus
from stockroom.inventory_domain.domain.repositories.inventory_repository import (
    IInventoryReader,
    IInventoryRepository,
)
from stockroom.inventory_domain.domain.services.stock_classifier import classify, matches_filter

logger = logging.getLogger(__name__)


def _to_view_item(record: InventoryRecord) -> InventoryViewItemDTO:
    return InventoryViewItemDTO(
        item_id=record.item_id,
        item_name=record.item_name,
        stock=record.stock,
        capacity=record.capacity,
        status=classify(record.stock, record.capacity),
    )


def _parse_filter(inventory_filter: InventoryFilter | str) -> InventoryFilter:
    if isinstance(inventory_filter, InventoryFilter):
        return inventory_filter
    try:
        return InventoryFilter(str(inventory_filter).strip().lower())
    except ValueError:
        valid = ", ".join(f.value for f in InventoryFilter)
        raise InvalidArgumentError(f"Unknown inventory filter '{inventory_filter}'. Valid filters: {valid}")


class InventoryQueryService:
    """Lists inventory records with their computed StockStatus."""

    def __init__(self, inventory_repo: IInventoryReader) -> None:
        self.inventory_repo = inventory_repo

    def list_by_filter(self, inventory_filter: InventoryFilter | str = InventoryFilter.ALL) -> list[InventoryViewItemDTO]:
        """
        Returns the records matching `inventory_filter`, ordered by item id.
        ALL returns every record; the other filters use the classifier predicates.
        """
        inventory_filter = _parse_filter(inventory_filter)
        records = self.inventory_repo.get_inventory_records()

        matching = [
            _to_view_item(record)
            for record in sorted(records, key=lambda r: r.item_id)
            if matches_filter(inventory_filter, record.stock, record.capacity)
        ]
        logger.debug(f"Inventory view '{inventory_filter.value}': {len(matching)} of {len(records)} records")
        return matching

    def get_inventory_item(self, item_id: int) -> InventoryViewItemDTO:
        """Returns the inventory row of one item with its status."""
        record = self.inventory_repo.get_inventory_record(item_id)
        if record is None:
            raise NotFoundError(f"Inventory item with ID {item_id} not found")
        return _to_view_item(record)

    def get_stock_summary(self) -> StockSummaryDTO:
        """Counts records per StockStatus from a single fetch."""
        summary = StockSummaryDTO()
        for item in self.list_by_filter(InventoryFilter.ALL):
            summary.total += 1
            if item.status is StockStatus.OUT_OF_STOCK:
                summary.out_of_stock += 1
            elif item.status is StockStatus.LOW_STOCK:
                summary.low_stock += 1
            elif item.status is StockStatus.OVERSTOCKED:
                summary.overstocked += 1
            else:
                summary.good += 1
        return summary

    # Write-through helpers, only available when backed by a full repository

    def _writable_repo(self) -> IInventoryRepository:
        if not isinstance(self.inventory_repo, IInventoryRepository):
            raise ReadOnlySourceError("Inventory source is read-only")
        return self.inventory_repo

    def add_inventory_record(self, item_id: int, stock: int, capacity: int) -> InventoryViewItemDTO:
        """Validates and stores a new inventory record, returning it with its status."""
        status = classify(stock, capacity)
        self._writable_repo().add_inventory_record(item_id, stock, capacity)
        logger.info(f"Inventory record added for item {item_id}: {stock}/{capacity} ({status.label})")
        return self.get_inventory_item(item_id)

    def update_inventory_record(
        self, item_id: int, stock: Optional[int] = None, capacity: Optional[int] = None
    ) -> InventoryViewItemDTO:
        """Updates stock and/or capacity; the resulting pair must still be classifiable."""
        if stock is None and capacity is None:
            raise InvalidArgumentError("At least one parameter (stock or capacity) must be provided")

        current = self.get_inventory_item(item_id)
        classify(current.stock if stock is None else stock, current.capacity if capacity is None else capacity)

        self._writable_repo().update_inventory_record(item_id, stock=stock, capacity=capacity)
        logger.info(f"Inventory record updated for item {item_id}")
        return self.get_inventory_item(item_id)

    def delete_inventory_record(self, item_id: int) -> None:
        self._writable_repo().delete_inventory_record(item_id)
        logger.info(f"Inventory record deleted for item {item_id}")
