# stockroom/procurement_domain/domain/services/cheapest_restock_resolver.py
"""Finds the cheapest distributor to restock an item from."""

import logging
from typing import Iterable

from stockroom.common.exceptions.custom_exceptions import (
    InvalidArgumentError,
    NoOffersError,
    NotFoundError,
)
from stockroom.common.utils.money_utils import round_money
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer
from stockroom.procurement_domain.domain.entities.restock_quote import RestockQuote
from stockroom.procurement_domain.domain.repositories.price_catalog_repository import IPriceCatalog

logger = logging.getLogger(__name__)


def _require_positive_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")


def select_cheapest_offer(offers: Iterable[PriceOffer]) -> PriceOffer:
    """
    Returns the offer with the lowest unit cost.
    Equal prices go to the lowest distributor id so the choice is reproducible.

    Raises:
        ValueError: offers is empty.
    """
    return min(offers, key=lambda offer: (offer.unit_cost, offer.distributor_id))


class CheapestRestockResolver:
    """Quotes the cheapest restock of an item. Reads the catalog, never writes to it."""

    def __init__(self, price_catalog: IPriceCatalog) -> None:
        self.price_catalog = price_catalog

    def find_cheapest(self, item_id: int, quantity: int) -> RestockQuote:
        """
        Builds a RestockQuote for `quantity` units of `item_id`.

        Raises:
            InvalidArgumentError: item_id or quantity is not a positive integer.
            NotFoundError: the item is unknown to the catalog.
            NoOffersError: the item exists but no distributor sells it.
            UpstreamUnavailableError: the catalog could not be read.
        """
        _require_positive_int("item_id", item_id)
        _require_positive_int("quantity", quantity)

        offers = self.price_catalog.get_offers_for_item(item_id)
        if offers is None:
            raise NotFoundError(f"Item with ID {item_id} does not exist")
        if not offers:
            raise NoOffersError(item_id)

        cheapest = select_cheapest_offer(offers)
        total_cost = round_money(cheapest.unit_cost * quantity)

        logger.debug(
            f"Cheapest offer for item {item_id}: {cheapest.distributor_name} at {cheapest.unit_cost} "
            f"({len(offers)} offers considered)"
        )

        return RestockQuote(
            item_id=item_id,
            quantity=quantity,
            distributor_id=cheapest.distributor_id,
            distributor_name=cheapest.distributor_name,
            unit_cost=cheapest.unit_cost,
            total_cost=total_cost,
        )
