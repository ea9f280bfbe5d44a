"""Data Transfer Objects for items, distributors and their prices."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from stockroom.inventory_domain.domain.entities.stock_status import StockStatus
from stockroom.procurement_domain.domain.entities.restock_quote import RestockQuote


@dataclass
class ItemDTO:
    id: int
    name: str


@dataclass
class DistributorDTO:
    id: int
    name: str


@dataclass
class DistributorItemDTO:
    """DTO for an item in a distributor's catalog together with its price."""

    item_id: int
    item_name: str
    unit_cost: Decimal


@dataclass
class RestockSuggestionDTO:
    """DTO for one line of a restock plan: what to buy for a short item and from whom."""

    item_id: int
    item_name: str
    stock: int
    capacity: int
    status: StockStatus
    quantity_needed: int
    quote: Optional[RestockQuote] = None
    reason: Optional[str] = None  # Why no quote could be produced
