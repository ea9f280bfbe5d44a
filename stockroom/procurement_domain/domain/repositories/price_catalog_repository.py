# stockroom/procurement_domain/domain/repositories/price_catalog_repository.py
"""Price catalog repository interfaces."""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from stockroom.common.dtos.catalog_dtos import DistributorDTO, DistributorItemDTO, ItemDTO
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer


class IPriceCatalog(ABC):
    """Read-only price lookup used by the restock resolver."""

    @abstractmethod
    def get_offers_for_item(self, item_id: int) -> Optional[list[PriceOffer]]:
        """
        Retrieves every offer for an item.
        Returns an empty list when the item exists but nobody sells it, and None when the item is unknown.
        """
        pass


class ICatalogRepository(IPriceCatalog):

    @abstractmethod
    def create_tables(self) -> None:
        """Creates items, distributors and distributor_prices tables if they do not exist."""
        pass

    @abstractmethod
    def add_item(self, name: str) -> int:
        """Adds an item and returns its new id."""
        pass

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[ItemDTO]:
        """Retrieves one item by id."""
        pass

    @abstractmethod
    def get_all_items(self) -> list[ItemDTO]:
        """Retrieves all items ordered by id."""
        pass

    @abstractmethod
    def update_item(self, item_id: int, name: str) -> None:
        """Renames an item."""
        pass

    @abstractmethod
    def delete_item(self, item_id: int) -> None:
        """Deletes an item together with its offers and inventory record."""
        pass

    @abstractmethod
    def add_distributor(self, name: str) -> int:
        """Adds a distributor and returns its new id."""
        pass

    @abstractmethod
    def get_distributor(self, distributor_id: int) -> Optional[DistributorDTO]:
        """Retrieves one distributor by id."""
        pass

    @abstractmethod
    def get_all_distributors(self) -> list[DistributorDTO]:
        """Retrieves all distributors ordered by id."""
        pass

    @abstractmethod
    def update_distributor(self, distributor_id: int, name: str) -> None:
        """Renames a distributor."""
        pass

    @abstractmethod
    def delete_distributor(self, distributor_id: int) -> None:
        """Deletes a distributor together with its offers."""
        pass

    @abstractmethod
    def save_price_offer(self, distributor_id: int, item_id: int, unit_cost: Decimal) -> None:
        """Saves or replaces the price of an item in a distributor's catalog."""
        pass

    @abstractmethod
    def delete_price_offer(self, distributor_id: int, item_id: int) -> None:
        """Removes an item from a distributor's catalog."""
        pass

    @abstractmethod
    def get_items_by_distributor(self, distributor_id: int) -> list[DistributorItemDTO]:
        """Retrieves the catalog of one distributor ordered by item id."""
        pass
