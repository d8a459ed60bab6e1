"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BillItemSpec:
    """Input: which product to bill and how many."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class BillLineDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str | None  # only known while the product is resolved
    quantity: int
    unit_price: str  # formatted, e.g. "$9.99"
    subtotal: str


@dataclass(frozen=True)
class BillDTO:
    """Output: a complete bill as displayed to the user."""

    id: int
    customer_id: str
    status: str
    items: list[BillLineDTO]
    total: str
    billing_date: str
    finalized_at: str | None


@dataclass(frozen=True)
class BillSummaryDTO:
    """Output: one row of the bill listing."""

    id: int
    customer_id: str
    status: str
    item_count: int
    total: str
