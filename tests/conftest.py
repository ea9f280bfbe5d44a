# tests/conftest.py
from decimal import Decimal
from unittest.mock import Mock

import pytest

from stockroom.common.config.settings import settings
from stockroom.inventory_domain.domain.entities.inventory_record import InventoryRecord
from stockroom.inventory_domain.infrastructure.persistence.mysql_inventory_repository import (
    MySQLInventoryRepository,
)
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer
from stockroom.procurement_domain.infrastructure.persistence.mysql_catalog_repository import (
    MySQLCatalogRepository,
)


@pytest.fixture(autouse=True)
def mock_settings_db_info(mocker) -> None:
    """Mocks the DB settings so no test ever points at a real server."""
    mocker.patch.object(settings, "DB_HOST", "localhost")
    mocker.patch.object(settings, "DB_DATABASE", "test_db")
    mocker.patch.object(settings, "DB_USER", "test_user")
    mocker.patch.object(settings, "DB_PASSWORD", "test_password")


@pytest.fixture
def mock_catalog_repository() -> Mock:
    """Mock for MySQLCatalogRepository."""
    return Mock(spec=MySQLCatalogRepository)


@pytest.fixture
def mock_inventory_repository() -> Mock:
    """Mock for MySQLInventoryRepository."""
    return Mock(spec=MySQLInventoryRepository)


@pytest.fixture
def widget_offers() -> list[PriceOffer]:
    """Widget (item 42) sold by Distributor A at 4.25 and Distributor B at 3.99."""
    return [
        PriceOffer(distributor_id=1, distributor_name="Distributor A", item_id=42, unit_cost=Decimal("4.25")),
        PriceOffer(distributor_id=2, distributor_name="Distributor B", item_id=42, unit_cost=Decimal("3.99")),
    ]


@pytest.fixture
def sample_inventory_records() -> list[InventoryRecord]:
    """One record per status, deliberately not in item id order."""
    return [
        InventoryRecord(item_id=19, item_name="Lollipops", stock=50, capacity=40),  # Overstocked
        InventoryRecord(item_id=2, item_name="Good & Plenty", stock=4, capacity=20),  # LowStock
        InventoryRecord(item_id=1, item_name="Licorice", stock=22, capacity=25),  # Good
        InventoryRecord(item_id=18, item_name="Jawbreakers", stock=0, capacity=30),  # OutOfStock
        InventoryRecord(item_id=13, item_name="Starburst", stock=8, capacity=45),  # LowStock
        InventoryRecord(item_id=7, item_name="Circus Peanuts", stock=10, capacity=10),  # Good, full
    ]
