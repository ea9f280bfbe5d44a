# stockroom/procurement_domain/infrastructure/persistence/mysql_catalog_repository.py
"""MySQL implementation of the item/distributor/price catalog repository."""

import logging
from decimal import Decimal
from typing import Optional

from mysql.connector import Error

from stockroom.common.dtos.catalog_dtos import DistributorDTO, DistributorItemDTO, ItemDTO
from stockroom.common.exceptions.custom_exceptions import DatabaseError, NotFoundError
from stockroom.common.persistence.mysql_connection import MySQLRepositoryBase
from stockroom.common.utils.money_utils import to_money
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer
from stockroom.procurement_domain.domain.repositories.price_catalog_repository import ICatalogRepository

logger = logging.getLogger(__name__)


class MySQLCatalogRepository(MySQLRepositoryBase, ICatalogRepository):
    """MySQL implementation of the Catalog Repository."""

    def create_tables(self) -> None:
        """Creates the items, distributors and distributor_prices tables."""
        create_items_table_query = """
        CREATE TABLE IF NOT EXISTS items (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            name VARCHAR(255) NOT NULL,
            UNIQUE KEY uk_item_name (name)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        create_distributors_table_query = """
        CREATE TABLE IF NOT EXISTS distributors (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            name VARCHAR(255) NOT NULL,
            UNIQUE KEY uk_distributor_name (name)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        create_distributor_prices_table_query = """
        CREATE TABLE IF NOT EXISTS distributor_prices (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            distributor INT UNSIGNED NOT NULL,
            item INT UNSIGNED NOT NULL,
            cost DECIMAL(10, 2) NOT NULL,
            UNIQUE KEY uk_distributor_item (distributor, item), -- One offer per pair
            INDEX idx_item (item),
            CONSTRAINT fk_prices_distributor FOREIGN KEY (distributor) REFERENCES distributors(id) ON DELETE CASCADE,
            CONSTRAINT fk_prices_item FOREIGN KEY (item) REFERENCES items(id) ON DELETE CASCADE,
            CONSTRAINT chk_cost_non_negative CHECK (cost >= 0)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_items_table_query)
            cursor.execute(create_distributors_table_query)
            cursor.execute(create_distributor_prices_table_query)
            conn.commit()
            logger.info("Catalog tables checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating catalog tables: {e}", original_exception=e)
        finally:
            cursor.close()

    # ---------------------------------------------------------------- items

    def add_item(self, name: str) -> int:
        """Adds an item and returns its new id."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("INSERT INTO items (name) VALUES (%s)", (name,))
            conn.commit()
            logger.info(f"Item '{name}' added with ID {cursor.lastrowid}")
            return cursor.lastrowid
        except Error as e:
            conn.rollback()
            raise self._translate_write_error(
                e, f"Item with name '{name}' already exists", "Referenced record does not exist"
            )
        finally:
            cursor.close()

    def get_item(self, item_id: int) -> Optional[ItemDTO]:
        """Retrieves one item by id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute("SELECT id, name FROM items WHERE id = %s", (item_id,))
            row = cursor.fetchone()
            return ItemDTO(id=row["id"], name=row["name"]) if row else None
        except Error as e:
            raise DatabaseError(f"Error fetching item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_all_items(self) -> list[ItemDTO]:
        """Retrieves all items ordered by id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute("SELECT id, name FROM items ORDER BY id")
            return [ItemDTO(id=row["id"], name=row["name"]) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error fetching items: {e}", original_exception=e)
        finally:
            cursor.close()

    def update_item(self, item_id: int, name: str) -> None:
        """Renames an item."""
        self._rename("items", "Item", item_id, name)

    def delete_item(self, item_id: int) -> None:
        """Deletes an item; its offers and inventory record go with it (ON DELETE CASCADE)."""
        self._delete_by_id("items", "Item", item_id)

    # --------------------------------------------------------- distributors

    def add_distributor(self, name: str) -> int:
        """Adds a distributor and returns its new id."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute("INSERT INTO distributors (name) VALUES (%s)", (name,))
            conn.commit()
            logger.info(f"Distributor '{name}' added with ID {cursor.lastrowid}")
            return cursor.lastrowid
        except Error as e:
            conn.rollback()
            raise self._translate_write_error(
                e, f"Distributor with name '{name}' already exists", "Referenced record does not exist"
            )
        finally:
            cursor.close()

    def get_distributor(self, distributor_id: int) -> Optional[DistributorDTO]:
        """Retrieves one distributor by id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute("SELECT id, name FROM distributors WHERE id = %s", (distributor_id,))
            row = cursor.fetchone()
            return DistributorDTO(id=row["id"], name=row["name"]) if row else None
        except Error as e:
            raise DatabaseError(f"Error fetching distributor {distributor_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_all_distributors(self) -> list[DistributorDTO]:
        """Retrieves all distributors ordered by id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute("SELECT id, name FROM distributors ORDER BY id")
            return [DistributorDTO(id=row["id"], name=row["name"]) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error fetching distributors: {e}", original_exception=e)
        finally:
            cursor.close()

    def update_distributor(self, distributor_id: int, name: str) -> None:
        """Renames a distributor."""
        self._rename("distributors", "Distributor", distributor_id, name)

    def delete_distributor(self, distributor_id: int) -> None:
        """Deletes a distributor; its offers go with it (ON DELETE CASCADE)."""
        self._delete_by_id("distributors", "Distributor", distributor_id)

    # --------------------------------------------------------------- prices

    def save_price_offer(self, distributor_id: int, item_id: int, unit_cost: Decimal) -> None:
        """Saves or replaces the price of an item for a distributor."""
        conn = self._get_connection()
        cursor = conn.cursor()

        insert_query = """
        INSERT INTO distributor_prices (distributor, item, cost)
        VALUES (%s, %s, %s)
        ON DUPLICATE KEY UPDATE
        cost = VALUES(cost)
        """
        try:
            cursor.execute(insert_query, (distributor_id, item_id, unit_cost))
            conn.commit()
            logger.info(f"Price for item {item_id} at distributor {distributor_id} set to {unit_cost}")
        except Error as e:
            conn.rollback()
            raise self._translate_write_error(
                e,
                f"Price for distributor {distributor_id} and item {item_id} already exists",
                f"Distributor {distributor_id} or item {item_id} does not exist",
            )
        finally:
            cursor.close()

    def delete_price_offer(self, distributor_id: int, item_id: int) -> None:
        """Removes an item from a distributor's catalog."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(
                "DELETE FROM distributor_prices WHERE distributor = %s AND item = %s", (distributor_id, item_id)
            )
            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError(
                    f"Distributor price not found for distributor ID {distributor_id} and item ID {item_id}"
                )
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error deleting distributor price: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_offers_for_item(self, item_id: int) -> Optional[list[PriceOffer]]:
        """
        Retrieves every offer for an item in one query.
        No row at all means the item is unknown; a single row with NULL distributor means nobody sells it.
        """
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            query = """
            SELECT i.id AS item_id, d.id AS distributor_id, d.name AS distributor_name, dp.cost
            FROM items i
            LEFT JOIN distributor_prices dp ON dp.item = i.id
            LEFT JOIN distributors d ON d.id = dp.distributor
            WHERE i.id = %s
            ORDER BY dp.cost ASC, d.id ASC
            """
            cursor.execute(query, (item_id,))
            rows = cursor.fetchall()
        except Error as e:
            raise DatabaseError(f"Error fetching offers for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()

        if not rows:
            return None
        return [
            PriceOffer(
                distributor_id=row["distributor_id"],
                distributor_name=row["distributor_name"],
                item_id=row["item_id"],
                unit_cost=to_money(row["cost"]),
            )
            for row in rows
            if row["distributor_id"] is not None
        ]

    def get_items_by_distributor(self, distributor_id: int) -> list[DistributorItemDTO]:
        """Retrieves the catalog of one distributor ordered by item id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            query = """
            SELECT i.id, i.name, dp.cost
            FROM items i
            JOIN distributor_prices dp ON i.id = dp.item
            WHERE dp.distributor = %s
            ORDER BY i.id
            """
            cursor.execute(query, (distributor_id,))
            return [
                DistributorItemDTO(item_id=row["id"], item_name=row["name"], unit_cost=to_money(row["cost"]))
                for row in cursor.fetchall()
            ]
        except Error as e:
            raise DatabaseError(f"Error fetching items for distributor {distributor_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    # -------------------------------------------------------------- helpers

    def _rename(self, table: str, label: str, record_id: int, name: str) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(f"SELECT id FROM {table} WHERE id = %s", (record_id,))
            if cursor.fetchone() is None:
                raise NotFoundError(f"{label} with ID {record_id} does not exist")
            cursor.execute(f"UPDATE {table} SET name = %s WHERE id = %s", (name, record_id))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise self._translate_write_error(
                e, f"{label} with name '{name}' already exists", f"{label} with ID {record_id} does not exist"
            )
        finally:
            cursor.close()

    def _delete_by_id(self, table: str, label: str, record_id: int) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(f"DELETE FROM {table} WHERE id = %s", (record_id,))
            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError(f"{label} with ID {record_id} does not exist")
            conn.commit()
            logger.info(f"{label} {record_id} deleted")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error deleting {label.lower()} {record_id}: {e}", original_exception=e)
        finally:
            cursor.close()
