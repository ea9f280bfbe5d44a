# main.py
"""Main application entry point for the daily stock health and restock report."""

import argparse
import json
import logging
import sys
import time
from datetime import datetime
from decimal import Decimal

import pytz
import schedule

from stockroom.common.config.settings import settings
from stockroom.common.exceptions.custom_exceptions import ApplicationError, DatabaseError
from stockroom.common.logger_config import setup_logging
from stockroom.common.persistence.mysql_database_manager import MySQLDatabaseManager
from stockroom.common.utils.money_utils import format_money

# Inventory Domain Imports
from stockroom.inventory_domain.application.inventory_service import InventoryQueryService
from stockroom.inventory_domain.domain.entities.stock_status import InventoryFilter
from stockroom.inventory_domain.infrastructure.persistence.mysql_inventory_repository import (
    MySQLInventoryRepository,
)

# Procurement Domain Imports
from stockroom.procurement_domain.application.catalog_service import CatalogApplicationService
from stockroom.procurement_domain.application.restock_planning_service import RestockPlanningService
from stockroom.procurement_domain.infrastructure.api_clients.catalog_api_client import CatalogApiClient
from stockroom.procurement_domain.infrastructure.persistence.mysql_catalog_repository import (
    MySQLCatalogRepository,
)

logger = logging.getLogger(__name__)


SOURCE_MYSQL = "mysql"
SOURCE_API = "api"


def resolve_source(requested: str | None) -> str:
    """Explicit --source wins; otherwise a configured CATALOG_API_BASE_URL selects the remote API."""
    if requested:
        return requested
    return SOURCE_API if settings.CATALOG_API_BASE_URL else SOURCE_MYSQL


def setup_dependencies(
    source: str = SOURCE_MYSQL,
) -> tuple[InventoryQueryService, RestockPlanningService, CatalogApplicationService, MySQLDatabaseManager | None]:
    """
    Initializes and wires up application dependencies.
    The remote API is read-only, so there is no database manager in that mode.
    """
    if source == SOURCE_API:
        api_client = CatalogApiClient()
        inventory_service = InventoryQueryService(inventory_repo=api_client)
        planning_service = RestockPlanningService(inventory_repo=api_client, price_catalog=api_client)
        catalog_service = CatalogApplicationService(catalog_repo=api_client)
        return inventory_service, planning_service, catalog_service, None

    catalog_repository = MySQLCatalogRepository()
    inventory_repository = MySQLInventoryRepository()

    inventory_service = InventoryQueryService(inventory_repo=inventory_repository)
    planning_service = RestockPlanningService(inventory_repo=inventory_repository, price_catalog=catalog_repository)
    catalog_service = CatalogApplicationService(catalog_repo=catalog_repository)
    database_manager = MySQLDatabaseManager(catalog_repo=catalog_repository, inventory_repo=inventory_repository)
    return inventory_service, planning_service, catalog_service, database_manager


def run_stock_report(inventory_service: InventoryQueryService, planning_service: RestockPlanningService) -> None:
    """Logs the per-status counters, the problem items and the cheapest restock for each short item."""
    report_tz = pytz.timezone(settings.REPORT_TIMEZONE)
    logger.info(f"\n{'='*80}")
    logger.info(f"📦 Stock health report, {datetime.now(report_tz).strftime('%Y-%m-%d %H:%M:%S %Z')}")
    logger.info(f"{'='*80}")

    summary = inventory_service.get_stock_summary()
    logger.info(f"Total stocked items: {summary.total}")
    logger.info(f"   Good: {summary.good}")
    logger.info(f"   Low Stock: {summary.low_stock}")
    logger.info(f"   Out of Stock: {summary.out_of_stock}")
    logger.info(f"   Overstocked: {summary.overstocked}")

    for inventory_filter in (InventoryFilter.OUT_OF_STOCK, InventoryFilter.LOW_STOCK, InventoryFilter.OVERSTOCKED):
        items = inventory_service.list_by_filter(inventory_filter)
        if not items:
            continue
        logger.info(f"\n{'─'*60}")
        logger.info(f"{items[0].status.label} ({len(items)})")
        for item in items:
            logger.info(f"   {item.item_id:>4}  {item.item_name:<25} {item.stock:>5} / {item.capacity:<5}")

    plan = planning_service.build_restock_plan()
    if not plan:
        logger.info("✅ Nothing to restock")
        return

    logger.info(f"\n{'─'*60}")
    logger.info(f"🛒 Restock plan ({len(plan)} items)")
    grand_total = Decimal("0.00")
    for suggestion in plan:
        if suggestion.quote is None:
            logger.warning(f"   {suggestion.item_name}: {suggestion.reason}")
            continue
        quote = suggestion.quote
        grand_total += quote.total_cost
        logger.info(
            f"   {suggestion.item_name}: buy {quote.quantity} from {quote.distributor_name} "
            f"at {format_money(quote.unit_cost)} = {format_money(quote.total_cost)}"
        )
    logger.info(f"   Total restock cost: {format_money(grand_total)}")


def run_scheduled_report(source: str = SOURCE_MYSQL) -> None:
    """Builds fresh dependencies for each run so a dropped DB connection does not stick around."""
    try:
        inventory_service, planning_service, _, _ = setup_dependencies(source)
        run_stock_report(inventory_service, planning_service)
    except ApplicationError as e:
        logger.error(f"❌ Stock report failed: {e}")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Stockroom stock health and restock report")
    parser.add_argument("--once", action="store_true", help="Run a single report and exit instead of scheduling")
    parser.add_argument("--reset", action="store_true", help="Drop, recreate and reseed the database first")
    parser.add_argument("--export", metavar="TABLE", help="Print one table as CSV and exit")
    parser.add_argument(
        "--source",
        choices=[SOURCE_MYSQL, SOURCE_API],
        help="Where stock and prices come from (default: api when CATALOG_API_BASE_URL is set, else mysql)",
    )
    parser.add_argument(
        "--quote",
        nargs=2,
        type=int,
        metavar=("ITEM_ID", "QUANTITY"),
        help="Print the cheapest restock quote for one item as JSON and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging()

    source = resolve_source(args.source)
    if source == SOURCE_API and (args.reset or args.export):
        logger.error("❌ --reset and --export need the MySQL source")
        return 1

    inventory_service, planning_service, catalog_service, database_manager = setup_dependencies(source)
    logger.info(f"Using {source} as stock and price source")
    try:
        if database_manager is not None:
            if args.reset:
                database_manager.reset_database()
            else:
                database_manager.create_tables()

        if args.export:
            sys.stdout.write(database_manager.export_table_to_csv(args.export))
            return 0

        if args.quote:
            item_id, quantity = args.quote
            quote = catalog_service.find_cheapest_restock(item_id, quantity)
            sys.stdout.write(json.dumps(quote.to_dict()) + "\n")
            return 0

        run_stock_report(inventory_service, planning_service)
    except DatabaseError as e:
        logger.error(f"❌ Database unavailable: {e}")
        return 1
    except ApplicationError as e:
        logger.error(f"❌ {e}")
        return 1

    if args.once:
        return 0

    report_tz = pytz.timezone(settings.REPORT_TIMEZONE)
    schedule.every().day.at(settings.REPORT_TIME, report_tz).do(run_scheduled_report, source)
    logger.info(f"⏰ Scheduler started. Next report daily at {settings.REPORT_TIME} {settings.REPORT_TIMEZONE}")
    while True:
        schedule.run_pending()
        time.sleep(30)


if __name__ == "__main__":
    sys.exit(main())
