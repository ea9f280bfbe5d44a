# stockroom/procurement_domain/application/restock_planning_service.py
"""Builds restock suggestions for items that are short on stock."""

import logging

from stockroom.common.dtos.catalog_dtos import RestockSuggestionDTO
from stockroom.common.exceptions.custom_exceptions import NoOffersError, NotFoundError
from stockroom.inventory_domain.application.inventory_service import InventoryQueryService
from stockroom.inventory_domain.domain.entities.stock_status import InventoryFilter, StockStatus
from stockroom.inventory_domain.domain.repositories.inventory_repository import IInventoryReader
from stockroom.procurement_domain.domain.repositories.price_catalog_repository import IPriceCatalog
from stockroom.procurement_domain.domain.services.cheapest_restock_resolver import CheapestRestockResolver

logger = logging.getLogger(__name__)


class RestockPlanningService:
    """
    For every low (and optionally empty) stock record, quotes the cheapest way to
    fill it back up to capacity. Advisory only: stock and prices are left untouched.
    """

    def __init__(self, inventory_repo: IInventoryReader, price_catalog: IPriceCatalog) -> None:
        self.inventory_service = InventoryQueryService(inventory_repo)
        self.resolver = CheapestRestockResolver(price_catalog)

    def build_restock_plan(self, include_out_of_stock: bool = True) -> list[RestockSuggestionDTO]:
        wanted = {StockStatus.LOW_STOCK}
        if include_out_of_stock:
            wanted.add(StockStatus.OUT_OF_STOCK)

        # Statuses all come from a single read of the inventory
        short_items = [
            item for item in self.inventory_service.list_by_filter(InventoryFilter.ALL) if item.status in wanted
        ]

        plan: list[RestockSuggestionDTO] = []
        for item in short_items:
            suggestion = RestockSuggestionDTO(
                item_id=item.item_id,
                item_name=item.item_name,
                stock=item.stock,
                capacity=item.capacity,
                status=item.status,
                quantity_needed=item.capacity - item.stock,
            )
            try:
                suggestion.quote = self.resolver.find_cheapest(item.item_id, suggestion.quantity_needed)
            except (NoOffersError, NotFoundError) as e:
                suggestion.reason = str(e)
                logger.warning(f"No restock quote for '{item.item_name}' (ID {item.item_id}): {e}")
            plan.append(suggestion)

        logger.info(f"Restock plan built: {len(plan)} items need restocking")
        return plan
