# stockroom/common/persistence/mysql_database_manager.py
"""Schema setup, demo seed data, reset and CSV export across all stockroom tables."""

import csv
import io
import logging

from mysql.connector import Error

from stockroom.common.exceptions.custom_exceptions import DatabaseError, InvalidArgumentError
from stockroom.common.persistence.mysql_connection import MySQLRepositoryBase
from stockroom.inventory_domain.infrastructure.persistence.mysql_inventory_repository import (
    MySQLInventoryRepository,
)
from stockroom.procurement_domain.infrastructure.persistence.mysql_catalog_repository import (
    MySQLCatalogRepository,
)

logger = logging.getLogger(__name__)

# Dependency order: parents first. Dropping walks it backwards.
TABLES = ("items", "distributors", "distributor_prices", "inventory")

SEED_ITEMS = [
    (1, "Licorice"),
    (2, "Good & Plenty"),
    (3, "Smarties"),
    (4, "Tootsie Rolls"),
    (5, "Necco Wafers"),
    (6, "Wax Cola Bottles"),
    (7, "Circus Peanuts"),
    (8, "Candy Corn"),
    (9, "Twix"),
    (10, "Snickers"),
    (11, "M&Ms"),
    (12, "Skittles"),
    (13, "Starburst"),
    (14, "Butterfinger"),
    (15, "Peach Rings"),
    (16, "Gummy Bears"),
    (17, "Sour Patch Kids"),
]

# (item, stock, capacity)
SEED_INVENTORY = [
    (1, 22, 25), (2, 4, 20), (3, 15, 25), (4, 30, 50), (5, 14, 15), (6, 8, 10), (7, 10, 10), (8, 30, 40),
    (9, 17, 70), (10, 43, 65), (11, 32, 55), (12, 25, 45), (13, 8, 45), (14, 10, 60), (15, 20, 30),
    (16, 15, 35), (17, 14, 60),
]

SEED_DISTRIBUTORS = [(1, "Candy Corp"), (2, "The Sweet Suite"), (3, "Dentists Hate Us")]

# (distributor, item, cost)
SEED_DISTRIBUTOR_PRICES = [
    (1, 1, "0.81"), (1, 2, "0.46"), (1, 3, "0.89"), (1, 4, "0.45"),
    (2, 2, "0.18"), (2, 3, "0.54"), (2, 4, "0.67"), (2, 5, "0.25"), (2, 6, "0.35"), (2, 7, "0.23"),
    (2, 8, "0.41"), (2, 9, "0.54"), (2, 10, "0.25"), (2, 11, "0.52"), (2, 12, "0.07"), (2, 13, "0.77"),
    (2, 14, "0.93"), (2, 15, "0.11"), (2, 16, "0.42"),
    (3, 10, "0.47"), (3, 11, "0.84"), (3, 12, "0.15"), (3, 13, "0.07"), (3, 14, "0.97"), (3, 15, "0.39"),
    (3, 16, "0.91"), (3, 17, "0.85"),
]


class MySQLDatabaseManager(MySQLRepositoryBase):
    """Owns whole-database operations; per-table DDL stays with the repositories."""

    def __init__(
        self,
        catalog_repo: MySQLCatalogRepository | None = None,
        inventory_repo: MySQLInventoryRepository | None = None,
    ) -> None:
        super().__init__()
        self.catalog_repo = catalog_repo or MySQLCatalogRepository()
        self.inventory_repo = inventory_repo or MySQLInventoryRepository()

    def create_tables(self) -> None:
        """Creates every table, catalog first since inventory references items."""
        self.catalog_repo.create_tables()
        self.inventory_repo.create_tables()

    def seed_database(self) -> None:
        """Loads the demo candy shop data set."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.executemany("INSERT INTO items (id, name) VALUES (%s, %s)", SEED_ITEMS)
            cursor.executemany("INSERT INTO distributors (id, name) VALUES (%s, %s)", SEED_DISTRIBUTORS)
            cursor.executemany(
                "INSERT INTO distributor_prices (distributor, item, cost) VALUES (%s, %s, %s)",
                SEED_DISTRIBUTOR_PRICES,
            )
            cursor.executemany(
                "INSERT INTO inventory (item, stock, capacity) VALUES (%s, %s, %s)", SEED_INVENTORY
            )
            conn.commit()
            logger.info(
                f"Database seeded: {len(SEED_ITEMS)} items, {len(SEED_DISTRIBUTORS)} distributors, "
                f"{len(SEED_DISTRIBUTOR_PRICES)} prices, {len(SEED_INVENTORY)} inventory records"
            )
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error seeding database: {e}", original_exception=e)
        finally:
            cursor.close()

    def drop_tables(self) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            for table in reversed(TABLES):
                cursor.execute(f"DROP TABLE IF EXISTS {table}")
            conn.commit()
            logger.info("All stockroom tables dropped.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error dropping tables: {e}", original_exception=e)
        finally:
            cursor.close()

    def reset_database(self) -> None:
        """Drops, recreates and reseeds every table."""
        logger.warning("Resetting database: all data will be replaced by the seed data set")
        self.drop_tables()
        self.create_tables()
        self.seed_database()

    def export_table_to_csv(self, table_name: str) -> str:
        """
        Dumps one table as CSV text with a header row.
        Only the stockroom tables are exportable; the name is matched case-insensitively.
        """
        table = next((t for t in TABLES if t.lower() == (table_name or "").strip().lower()), None)
        if table is None:
            raise InvalidArgumentError(f"Invalid table name '{table_name}'. Valid tables: {', '.join(TABLES)}")

        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(f"SELECT * FROM {table} ORDER BY id")
            rows = cursor.fetchall()
            header = [column[0] for column in cursor.description]
        except Error as e:
            raise DatabaseError(f"Error exporting table {table} to CSV: {e}", original_exception=e)
        finally:
            cursor.close()

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(header)
        writer.writerows(["" if value is None else value for value in row] for row in rows)
        logger.info(f"Exported {len(rows)} rows from {table}")
        return buffer.getvalue()
