# tests/test_procurement_domain/test_application/test_restock_planning_service.py
"""Tests for the Restock Planning Service."""

from decimal import Decimal

import pytest

from stockroom.common.exceptions.custom_exceptions import DatabaseError
from stockroom.inventory_domain.domain.entities.inventory_record import InventoryRecord
from stockroom.inventory_domain.domain.entities.stock_status import StockStatus
from stockroom.procurement_domain.application.restock_planning_service import RestockPlanningService
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer


def _offers_by_item(item_id: int):
    offers = {
        2: [
            PriceOffer(distributor_id=1, distributor_name="Candy Corp", item_id=2, unit_cost=Decimal("0.46")),
            PriceOffer(distributor_id=2, distributor_name="The Sweet Suite", item_id=2, unit_cost=Decimal("0.18")),
        ],
        13: [PriceOffer(distributor_id=3, distributor_name="Dentists Hate Us", item_id=13, unit_cost=Decimal("0.30"))],
        18: [],
    }
    return offers.get(item_id)


@pytest.fixture
def planning_service(mock_inventory_repository, mock_catalog_repository, sample_inventory_records):
    mock_inventory_repository.get_inventory_records.return_value = sample_inventory_records
    mock_catalog_repository.get_offers_for_item.side_effect = _offers_by_item
    return RestockPlanningService(inventory_repo=mock_inventory_repository, price_catalog=mock_catalog_repository)


def test_build_restock_plan_covers_short_items_in_id_order(planning_service) -> None:
    plan = planning_service.build_restock_plan()

    assert [s.item_id for s in plan] == [2, 13, 18]
    assert [s.status for s in plan] == [StockStatus.LOW_STOCK, StockStatus.LOW_STOCK, StockStatus.OUT_OF_STOCK]
    assert [s.quantity_needed for s in plan] == [16, 37, 30]


def test_build_restock_plan_quotes_cheapest_distributor(planning_service) -> None:
    plan = planning_service.build_restock_plan()

    good_and_plenty = plan[0]
    assert good_and_plenty.quote.distributor_name == "The Sweet Suite"
    assert good_and_plenty.quote.quantity == 16
    assert good_and_plenty.quote.total_cost == Decimal("2.88")
    assert good_and_plenty.reason is None

    assert plan[1].quote.total_cost == Decimal("11.10")


def test_build_restock_plan_records_reason_when_nobody_sells(planning_service, caplog) -> None:
    with caplog.at_level("WARNING"):
        plan = planning_service.build_restock_plan()

    jawbreakers = plan[2]
    assert jawbreakers.quote is None
    assert jawbreakers.reason == "No distributors found for item ID 18"
    assert "No restock quote for 'Jawbreakers' (ID 18)" in caplog.text


def test_build_restock_plan_without_out_of_stock(planning_service) -> None:
    plan = planning_service.build_restock_plan(include_out_of_stock=False)

    assert [s.item_id for s in plan] == [2, 13]


def test_build_restock_plan_unknown_item_in_catalog(planning_service, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.side_effect = lambda item_id: None

    plan = planning_service.build_restock_plan()

    assert all(s.quote is None for s in plan)
    assert plan[0].reason == "Not Found: Item with ID 2 does not exist"


def test_build_restock_plan_nothing_short(mock_inventory_repository, mock_catalog_repository) -> None:
    mock_inventory_repository.get_inventory_records.return_value = []
    service = RestockPlanningService(inventory_repo=mock_inventory_repository, price_catalog=mock_catalog_repository)

    assert service.build_restock_plan() == []
    mock_catalog_repository.get_offers_for_item.assert_not_called()


def test_build_restock_plan_does_not_swallow_upstream_errors(planning_service, mock_catalog_repository) -> None:
    mock_catalog_repository.get_offers_for_item.side_effect = DatabaseError("Lost connection")

    with pytest.raises(DatabaseError):
        planning_service.build_restock_plan()


def test_build_restock_plan_never_writes(planning_service, mock_inventory_repository, mock_catalog_repository) -> None:
    planning_service.build_restock_plan()

    mock_inventory_repository.update_inventory_record.assert_not_called()
    mock_catalog_repository.save_price_offer.assert_not_called()


def test_build_restock_plan_reads_inventory_once(planning_service, mock_inventory_repository) -> None:
    restocked = [InventoryRecord(item_id=2, item_name="Good & Plenty", stock=20, capacity=20)]
    mock_inventory_repository.get_inventory_records.side_effect = [
        [InventoryRecord(item_id=2, item_name="Good & Plenty", stock=4, capacity=20)],
        restocked,
    ]

    plan = planning_service.build_restock_plan()

    assert [s.item_id for s in plan] == [2]
    mock_inventory_repository.get_inventory_records.assert_called_once()
