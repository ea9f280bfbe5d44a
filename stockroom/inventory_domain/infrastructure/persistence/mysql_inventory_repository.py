# stockroom/inventory_domain/infrastructure/persistence/mysql_inventory_repository.py
"""MySQL implementation of the Inventory repository."""

import logging
from typing import Optional

from mysql.connector import Error

from stockroom.common.exceptions.custom_exceptions import DatabaseError, InvalidArgumentError, NotFoundError
from stockroom.common.persistence.mysql_connection import MySQLRepositoryBase
from stockroom.inventory_domain.domain.entities.inventory_record import InventoryRecord
from stockroom.inventory_domain.domain.repositories.inventory_repository import IInventoryRepository

logger = logging.getLogger(__name__)

_SELECT_INVENTORY = """
SELECT i.id, i.name, inv.stock, inv.capacity
FROM items i
JOIN inventory inv ON i.id = inv.item
"""


def _row_to_record(row: dict) -> InventoryRecord:
    return InventoryRecord(item_id=row["id"], item_name=row["name"], stock=row["stock"], capacity=row["capacity"])


class MySQLInventoryRepository(MySQLRepositoryBase, IInventoryRepository):
    """MySQL implementation of the Inventory Repository."""

    def create_tables(self) -> None:
        """Creates the inventory table. The items table must already exist."""
        create_inventory_table_query = """
        CREATE TABLE IF NOT EXISTS inventory (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            item INT UNSIGNED NOT NULL,
            stock INT UNSIGNED NOT NULL,
            capacity INT UNSIGNED NOT NULL,
            UNIQUE KEY uk_inventory_item (item), -- One record per item
            CONSTRAINT fk_inventory_item FOREIGN KEY (item) REFERENCES items(id) ON DELETE CASCADE,
            CONSTRAINT chk_capacity_positive CHECK (capacity > 0)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_inventory_table_query)
            conn.commit()
            logger.info("Inventory table checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating inventory table: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_inventory_records(self) -> list[InventoryRecord]:
        """Retrieves every inventory record joined with its item name, ordered by item id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute(_SELECT_INVENTORY + "ORDER BY i.id")
            return [_row_to_record(row) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error fetching inventory: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_inventory_record(self, item_id: int) -> Optional[InventoryRecord]:
        """Retrieves the inventory record of one item."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute(_SELECT_INVENTORY + "WHERE i.id = %s", (item_id,))
            row = cursor.fetchone()
            return _row_to_record(row) if row else None
        except Error as e:
            raise DatabaseError(f"Error fetching inventory for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def add_inventory_record(self, item_id: int, stock: int, capacity: int) -> None:
        """Adds the inventory record of an item."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT INTO inventory (item, stock, capacity) VALUES (%s, %s, %s)", (item_id, stock, capacity)
            )
            conn.commit()
        except Error as e:
            conn.rollback()
            raise self._translate_write_error(
                e,
                f"Inventory item for item {item_id} already exists",
                f"Item with ID {item_id} does not exist",
            )
        finally:
            cursor.close()

    def update_inventory_record(self, item_id: int, stock: Optional[int] = None, capacity: Optional[int] = None) -> None:
        """Updates stock and/or capacity of an existing record."""
        assignments = []
        params: list[int] = []
        if stock is not None:
            assignments.append("stock = %s")
            params.append(stock)
        if capacity is not None:
            assignments.append("capacity = %s")
            params.append(capacity)
        if not assignments:
            raise InvalidArgumentError("At least one parameter (stock or capacity) must be provided")
        params.append(item_id)

        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("SELECT id FROM inventory WHERE item = %s", (item_id,))
            if cursor.fetchone() is None:
                raise NotFoundError(f"Inventory item with ID {item_id} not found")
            cursor.execute(f"UPDATE inventory SET {', '.join(assignments)} WHERE item = %s", tuple(params))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error updating inventory for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def delete_inventory_record(self, item_id: int) -> None:
        """Removes the inventory record of an item."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM inventory WHERE item = %s", (item_id,))
            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError(f"Inventory item with ID {item_id} not found")
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error deleting inventory for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()
