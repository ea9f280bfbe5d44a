# tests/test_procurement_domain/test_domain/test_cheapest_restock_resolver.py
"""Tests for the cheapest restock resolver."""

from decimal import Decimal

import pytest

from stockroom.common.exceptions.custom_exceptions import (
    DatabaseError,
    InvalidArgumentError,
    NoOffersError,
    NotFoundError,
    UpstreamUnavailableError,
)
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer
from stockroom.procurement_domain.domain.entities.restock_quote import RestockQuote
from stockroom.procurement_domain.domain.services.cheapest_restock_resolver import (
    CheapestRestockResolver,
    select_cheapest_offer,
)


@pytest.fixture
def resolver(mock_catalog_repository) -> CheapestRestockResolver:
    return CheapestRestockResolver(price_catalog=mock_catalog_repository)


@pytest.fixture
def tied_offers() -> list[PriceOffer]:
    return [
        PriceOffer(distributor_id=1, distributor_name="distA", item_id=5, unit_cost=Decimal("2.00")),
        PriceOffer(distributor_id=2, distributor_name="distB", item_id=5, unit_cost=Decimal("1.50")),
        PriceOffer(distributor_id=3, distributor_name="distC", item_id=5, unit_cost=Decimal("1.50")),
    ]


def test_widget_scenario_picks_cheapest_distributor(resolver, mock_catalog_repository, widget_offers) -> None:
    """Widget at 4.25 (A) and 3.99 (B), quantity 10 -> B, 3.99, 39.90."""
    mock_catalog_repository.get_offers_for_item.return_value = widget_offers

    quote = resolver.find_cheapest(42, 10)

    mock_catalog_repository.get_offers_for_item.assert_called_once_with(42)
    assert quote == RestockQuote(
        item_id=42,
        quantity=10,
        distributor_id=2,
        distributor_name="Distributor B",
        unit_cost=Decimal("3.99"),
        total_cost=Decimal("39.90"),
    )
    assert quote.to_dict()["total_cost"] == "39.90"


@pytest.mark.parametrize("quantity", [1, 3, 7, 250])
def test_tie_goes_to_lowest_distributor_id(resolver, mock_catalog_repository, tied_offers, quantity) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = tied_offers

    quote = resolver.find_cheapest(5, quantity)

    assert quote.distributor_id == 2
    assert quote.distributor_name == "distB"
    assert quote.unit_cost == Decimal("1.50")
    assert quote.total_cost == (Decimal("1.50") * quantity).quantize(Decimal("0.01"))


def test_tie_break_does_not_depend_on_offer_order(resolver, mock_catalog_repository, tied_offers) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = list(reversed(tied_offers))

    assert resolver.find_cheapest(5, 4).distributor_id == 2


def test_single_offer_is_chosen(resolver, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = [
        PriceOffer(distributor_id=3, distributor_name="Dentists Hate Us", item_id=17, unit_cost=Decimal("0.85"))
    ]

    quote = resolver.find_cheapest(17, 46)

    assert quote.distributor_id == 3
    assert quote.total_cost == Decimal("39.10")


def test_zero_cost_offer_wins(resolver, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = [
        PriceOffer(distributor_id=1, distributor_name="Candy Corp", item_id=1, unit_cost=Decimal("0.81")),
        PriceOffer(distributor_id=9, distributor_name="Free Samples", item_id=1, unit_cost=Decimal("0.00")),
    ]

    quote = resolver.find_cheapest(1, 100)

    assert quote.distributor_id == 9
    assert quote.total_cost == Decimal("0.00")


def test_item_without_offers_raises_no_offers(resolver, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = []

    with pytest.raises(NoOffersError, match="No distributors found for item ID 8") as exc_info:
        resolver.find_cheapest(8, 5)
    assert exc_info.value.item_id == 8


def test_unknown_item_raises_not_found(resolver, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = None

    with pytest.raises(NotFoundError, match="Item with ID 999 does not exist"):
        resolver.find_cheapest(999, 5)


def test_not_found_and_no_offers_are_distinct(resolver, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = []
    with pytest.raises(NoOffersError) as exc_info:
        resolver.find_cheapest(8, 5)
    assert not isinstance(exc_info.value, NotFoundError)


@pytest.mark.parametrize("quantity", [0, -1, -100])
def test_non_positive_quantity_is_invalid(resolver, mock_catalog_repository, quantity) -> None:
    with pytest.raises(InvalidArgumentError, match="quantity must be a positive integer"):
        resolver.find_cheapest(42, quantity)
    mock_catalog_repository.get_offers_for_item.assert_not_called()


@pytest.mark.parametrize("quantity", [1.5, "10", True, None])
def test_non_integer_quantity_is_invalid(resolver, mock_catalog_repository, quantity) -> None:
    with pytest.raises(InvalidArgumentError):
        resolver.find_cheapest(42, quantity)
    mock_catalog_repository.get_offers_for_item.assert_not_called()


@pytest.mark.parametrize("item_id", [0, -3, "42"])
def test_invalid_item_id_is_rejected(resolver, mock_catalog_repository, item_id) -> None:
    with pytest.raises(InvalidArgumentError):
        resolver.find_cheapest(item_id, 1)
    mock_catalog_repository.get_offers_for_item.assert_not_called()


def test_catalog_failure_propagates_as_upstream_unavailable(resolver, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.side_effect = DatabaseError("Failed to connect to MySQL")

    with pytest.raises(UpstreamUnavailableError):
        resolver.find_cheapest(42, 1)


def test_repeated_calls_are_identical_and_side_effect_free(resolver, mock_catalog_repository, widget_offers) -> None:
    mock_catalog_repository.get_offers_for_item.return_value = widget_offers

    first = resolver.find_cheapest(42, 10)
    second = resolver.find_cheapest(42, 10)

    assert first == second
    # Only reads ever reach the catalog
    called = {name for name, _, _ in mock_catalog_repository.method_calls}
    assert called == {"get_offers_for_item"}


def test_select_cheapest_offer_on_empty_input_raises() -> None:
    with pytest.raises(ValueError):
        select_cheapest_offer([])
