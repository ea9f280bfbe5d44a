# tests/test_common/test_mysql_database_manager.py

from decimal import Decimal
from unittest.mock import MagicMock, call, patch

import pytest
from mysql.connector import Error

from stockroom.common.exceptions.custom_exceptions import DatabaseError, InvalidArgumentError
from stockroom.common.persistence.mysql_database_manager import (
    SEED_DISTRIBUTOR_PRICES,
    SEED_INVENTORY,
    SEED_ITEMS,
    TABLES,
    MySQLDatabaseManager,
)


@pytest.fixture
def mock_connection():
    with patch("mysql.connector.connect") as mock_connect:
        connection = MagicMock()
        connection.is_connected.return_value = True
        connection.cursor.return_value = MagicMock()
        mock_connect.return_value = connection
        yield connection


@pytest.fixture
def mock_cursor(mock_connection):
    return mock_connection.cursor.return_value


@pytest.fixture
def database_manager(mock_catalog_repository, mock_inventory_repository) -> MySQLDatabaseManager:
    return MySQLDatabaseManager(catalog_repo=mock_catalog_repository, inventory_repo=mock_inventory_repository)


def test_create_tables_catalog_before_inventory(database_manager, mock_catalog_repository, mock_inventory_repository):
    order = MagicMock()
    order.attach_mock(mock_catalog_repository.create_tables, "catalog")
    order.attach_mock(mock_inventory_repository.create_tables, "inventory")

    database_manager.create_tables()

    assert order.mock_calls == [call.catalog(), call.inventory()]


def test_seed_data_is_consistent() -> None:
    item_ids = {item_id for item_id, _ in SEED_ITEMS}
    assert all(item_id in item_ids for item_id, _, _ in SEED_INVENTORY)
    assert all(capacity > 0 and stock >= 0 for _, stock, capacity in SEED_INVENTORY)
    assert all(Decimal(cost) >= 0 for _, _, cost in SEED_DISTRIBUTOR_PRICES)


def test_seed_database(database_manager, mock_connection, mock_cursor) -> None:
    database_manager.seed_database()

    queries = [c[0][0] for c in mock_cursor.executemany.call_args_list]
    assert [q.split()[2] for q in queries] == ["items", "distributors", "distributor_prices", "inventory"]
    mock_connection.commit.assert_called_once()


def test_seed_database_error_rolls_back(database_manager, mock_connection, mock_cursor) -> None:
    mock_cursor.executemany.side_effect = Error("Duplicate entry")

    with pytest.raises(DatabaseError, match="Error seeding database"):
        database_manager.seed_database()

    mock_connection.rollback.assert_called_once()
    mock_connection.commit.assert_not_called()


def test_drop_tables_in_reverse_dependency_order(database_manager, mock_cursor) -> None:
    database_manager.drop_tables()

    dropped = [c[0][0] for c in mock_cursor.execute.call_args_list]
    assert dropped == [f"DROP TABLE IF EXISTS {table}" for table in reversed(TABLES)]
    assert dropped[0] == "DROP TABLE IF EXISTS inventory"


def test_reset_database(database_manager, mocker) -> None:
    mock_drop = mocker.patch.object(database_manager, "drop_tables")
    mock_create = mocker.patch.object(database_manager, "create_tables")
    mock_seed = mocker.patch.object(database_manager, "seed_database")
    order = MagicMock()
    order.attach_mock(mock_drop, "drop")
    order.attach_mock(mock_create, "create")
    order.attach_mock(mock_seed, "seed")

    database_manager.reset_database()

    assert order.mock_calls == [call.drop(), call.create(), call.seed()]


def test_export_table_to_csv(database_manager, mock_cursor) -> None:
    mock_cursor.description = [("id",), ("name",)]
    mock_cursor.fetchall.return_value = [(1, "Licorice"), (2, 'Snickers, "King" Size')]

    result = database_manager.export_table_to_csv("ITEMS")

    mock_cursor.execute.assert_called_once_with("SELECT * FROM items ORDER BY id")
    assert result == 'id,name\n1,Licorice\n2,"Snickers, ""King"" Size"\n'


def test_export_table_to_csv_formats_decimals_and_nulls(database_manager, mock_cursor) -> None:
    mock_cursor.description = [("id",), ("distributor",), ("item",), ("cost",)]
    mock_cursor.fetchall.return_value = [(1, 1, 1, Decimal("0.46")), (2, 2, 1, None)]

    result = database_manager.export_table_to_csv("distributor_prices")

    assert result.splitlines() == ["id,distributor,item,cost", "1,1,1,0.46", "2,2,1,"]


@pytest.mark.parametrize("table_name", ["users", "items; DROP TABLE items", "", None])
def test_export_table_to_csv_rejects_unknown_table(database_manager, mock_connection, table_name) -> None:
    with pytest.raises(InvalidArgumentError, match="Invalid table name"):
        database_manager.export_table_to_csv(table_name)

    mock_connection.cursor.assert_not_called()


def test_export_table_to_csv_database_error(database_manager, mock_cursor) -> None:
    mock_cursor.execute.side_effect = Error("Table 'stockroom_db.items' doesn't exist")

    with pytest.raises(DatabaseError, match="Error exporting table items to CSV"):
        database_manager.export_table_to_csv("items")

    mock_cursor.close.assert_called_once()
