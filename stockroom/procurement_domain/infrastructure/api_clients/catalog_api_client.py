# stockroom/procurement_domain/infrastructure/api_clients/catalog_api_client.py
"""Client for a remote inventory HTTP API, used as a read-only price catalog and stock source."""

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from stockroom.common.config.settings import settings
from stockroom.common.exceptions.custom_exceptions import APIError, MalformedResponseError
from stockroom.common.utils.money_utils import to_money
from stockroom.inventory_domain.domain.entities.inventory_record import InventoryRecord
from stockroom.inventory_domain.domain.repositories.inventory_repository import IInventoryReader
from stockroom.procurement_domain.domain.entities.price_offer import PriceOffer
from stockroom.procurement_domain.domain.repositories.price_catalog_repository import IPriceCatalog

logger = logging.getLogger(__name__)


def _as_int(value: Any, field: str) -> int:
    """Accepts whole numbers only; 3.7 or True are rejected rather than truncated."""
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError(f"{field} must be an integer, got {value!r}")


class CatalogApiClient(IPriceCatalog, IInventoryReader):
    """
    Reads items, offers and stock from the inventory service's REST endpoints:

        GET /items                      -> [{"id", "name"}, ...]
        GET /items/{id}/distributors    -> [{"id", "name", "cost"}, ...], [] for unknown items too
        GET /inventory                  -> [{"id", "name", "stock", "capacity"}, ...]
        GET /inventory/{id}             -> [] or [{"id", "name", "stock", "capacity"}]

    The service has no single-item route, so item existence is checked against GET /items.
    """

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None) -> None:
        self.base_url = (base_url or settings.CATALOG_API_BASE_URL or "").rstrip("/")
        self.token = token or settings.CATALOG_API_TOKEN
        self.timeout = settings.CATALOG_API_TIMEOUT

        # Configure session with connection pooling and retry strategy
        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            backoff_factor=1,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy, pool_connections=10, pool_maxsize=10)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def _get(self, path: str, allow_not_found: bool = False) -> Any:
        """Performs a GET and decodes the JSON body. Returns None on 404 when allowed."""
        if not self.base_url:
            raise APIError("CATALOG_API_BASE_URL is not set in environment variables.")

        url = f"{self.base_url}{path}"
        params = {"token": self.token} if self.token else None

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request to {path} timed out", original_exception=e)
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request to {path} failed", original_exception=e)

        if allow_not_found and response.status_code == 404:
            return None

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise APIError(f"Request to {path} failed", original_exception=e, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response from {path} is not valid JSON", original_exception=e)

    def _get_list(self, path: str, allow_not_found: bool = False) -> Optional[list]:
        payload = self._get(path, allow_not_found=allow_not_found)
        if payload is None:
            return None if allow_not_found else []
        if not isinstance(payload, list):
            raise MalformedResponseError(f"Expected a list from {path}, got {type(payload).__name__}")
        return payload

    def item_exists(self, item_id: int) -> bool:
        for entry in self._get_list("/items"):
            try:
                if _as_int(entry["id"], "id") == item_id:
                    return True
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedResponseError(f"Malformed item entry: {entry}", original_exception=e)
        return False

    def get_offers_for_item(self, item_id: int) -> Optional[list[PriceOffer]]:
        """Retrieves every offer for an item; None when the item is unknown to the remote service."""
        if not self.item_exists(item_id):
            return None

        offers: list[PriceOffer] = []
        for entry in self._get_list(f"/items/{item_id}/distributors"):
            try:
                offers.append(
                    PriceOffer(
                        distributor_id=_as_int(entry["id"], "id"),
                        distributor_name=entry["name"],
                        item_id=item_id,
                        unit_cost=to_money(entry["cost"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:  # InvalidArgumentError is a ValueError
                raise MalformedResponseError(f"Malformed offer for item {item_id}: {entry}", original_exception=e)
        logger.debug(f"Fetched {len(offers)} offers for item {item_id}")
        return offers

    def get_inventory_records(self) -> list[InventoryRecord]:
        """Retrieves every inventory record."""
        return [self._to_record(entry) for entry in self._get_list("/inventory")]

    def get_inventory_record(self, item_id: int) -> Optional[InventoryRecord]:
        """Retrieves one item's inventory record, None when the item is not stocked."""
        entries = self._get(f"/inventory/{item_id}", allow_not_found=True)
        if not entries:
            return None
        return self._to_record(entries[0] if isinstance(entries, list) else entries)

    @staticmethod
    def _to_record(entry: dict) -> InventoryRecord:
        try:
            return InventoryRecord(
                item_id=_as_int(entry["id"], "id"),
                item_name=entry["name"],
                stock=_as_int(entry["stock"], "stock"),
                capacity=_as_int(entry["capacity"], "capacity"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"Malformed inventory record: {entry}", original_exception=e)

    def __del__(self) -> None:
        """Clean up the session when the object is destroyed."""
        if hasattr(self, "session"):
            self.session.close()
