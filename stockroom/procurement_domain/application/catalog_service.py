# stockroom/procurement_domain/application/catalog_service.py
"""Application service for items, distributors, prices and restock quotes."""

import logging
from decimal import Decimal

from stockroom.common.dtos.catalog_dtos import DistributorDTO, DistributorItemDTO, ItemDTO
from stockroom.common.exceptions.custom_exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ReadOnlySourceError,
)
from stockroom.common.utils.money_utils import to_money
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer
from stockroom.procurement_domain.domain.entities.restock_quote import RestockQuote
from stockroom.procurement_domain.domain.repositories.price_catalog_repository import (
    ICatalogRepository,
    IPriceCatalog,
)
from stockroom.procurement_domain.domain.services.cheapest_restock_resolver import CheapestRestockResolver

logger = logging.getLogger(__name__)


def _clean_name(name: str, label: str) -> str:
    if name is None or not str(name).strip():
        raise InvalidArgumentError(f"{label} name is required")
    return str(name).strip()


def _clean_cost(cost: Decimal | float | int | str) -> Decimal:
    try:
        unit_cost = to_money(cost)
    except ValueError:
        raise InvalidArgumentError(f"Cost must be a number, got {cost!r}")
    if unit_cost < 0:
        raise InvalidArgumentError("Cost cannot be negative")
    return unit_cost


class CatalogApplicationService:
    """
    Validates catalog input and delegates to the repository and the restock resolver.
    Over a lookup-only source (the remote API) only offers and restock quotes are available.
    """

    def __init__(self, catalog_repo: IPriceCatalog) -> None:
        self.catalog_repo = catalog_repo
        self.resolver = CheapestRestockResolver(price_catalog=catalog_repo)

    def _managed_repo(self) -> ICatalogRepository:
        if not isinstance(self.catalog_repo, ICatalogRepository):
            raise ReadOnlySourceError("Catalog source only serves price lookups")
        return self.catalog_repo

    # Items

    def add_item(self, name: str) -> ItemDTO:
        name = _clean_name(name, "Item")
        item_id = self._managed_repo().add_item(name)
        return ItemDTO(id=item_id, name=name)

    def get_item(self, item_id: int) -> ItemDTO:
        item = self._managed_repo().get_item(item_id)
        if item is None:
            raise NotFoundError(f"Item with ID {item_id} not found")
        return item

    def get_all_items(self) -> list[ItemDTO]:
        return self._managed_repo().get_all_items()

    def rename_item(self, item_id: int, name: str) -> None:
        self._managed_repo().update_item(item_id, _clean_name(name, "Item"))

    def delete_item(self, item_id: int) -> None:
        self._managed_repo().delete_item(item_id)

    # Distributors

    def add_distributor(self, name: str) -> DistributorDTO:
        name = _clean_name(name, "Distributor")
        distributor_id = self._managed_repo().add_distributor(name)
        return DistributorDTO(id=distributor_id, name=name)

    def get_distributor(self, distributor_id: int) -> DistributorDTO:
        distributor = self._managed_repo().get_distributor(distributor_id)
        if distributor is None:
            raise NotFoundError(f"Distributor with ID {distributor_id} not found")
        return distributor

    def get_all_distributors(self) -> list[DistributorDTO]:
        return self._managed_repo().get_all_distributors()

    def rename_distributor(self, distributor_id: int, name: str) -> None:
        self._managed_repo().update_distributor(distributor_id, _clean_name(name, "Distributor"))

    def delete_distributor(self, distributor_id: int) -> None:
        self._managed_repo().delete_distributor(distributor_id)

    # Prices

    def set_price(self, distributor_id: int, item_id: int, cost: Decimal | float | int | str) -> Decimal:
        """Adds or replaces a distributor's price for an item and returns the stored cost."""
        unit_cost = _clean_cost(cost)
        self._managed_repo().save_price_offer(distributor_id, item_id, unit_cost)
        return unit_cost

    def remove_price(self, distributor_id: int, item_id: int) -> None:
        self._managed_repo().delete_price_offer(distributor_id, item_id)

    def get_items_by_distributor(self, distributor_id: int) -> list[DistributorItemDTO]:
        self.get_distributor(distributor_id)
        return self._managed_repo().get_items_by_distributor(distributor_id)

    def get_offers_for_item(self, item_id: int) -> list[PriceOffer]:
        """Returns the offers for an item, cheapest first."""
        offers = self.catalog_repo.get_offers_for_item(item_id)
        if offers is None:
            raise NotFoundError(f"Item with ID {item_id} not found")
        return sorted(offers, key=lambda offer: (offer.unit_cost, offer.distributor_id))

    def find_cheapest_restock(self, item_id: int, quantity: int) -> RestockQuote:
        """Quotes the cheapest way to buy `quantity` units of an item."""
        quote = self.resolver.find_cheapest(item_id, quantity)
        logger.info(
            f"Cheapest restock for item {item_id} x{quantity}: {quote.distributor_name} "
            f"at {quote.unit_cost} each, {quote.total_cost} total"
        )
        return quote
