"""Bill aggregate, the core of the domain.

The Bill is an aggregate root that owns its line items by containment.
Items refer back to their bill only through ``bill_id``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from billing.domain.exceptions import (
    AlreadyAssignedError,
    BillFinalizedError,
    ProductMismatchError,
    ValidationError,
)
from billing.domain.model.product import Product
from billing.domain.model.value_objects import Money, Quantity


class BillStatus(Enum):
    OPEN = "OPEN"
    FINALIZED = "FINALIZED"


@dataclass
class ProductItem:
    """A purchased line, as stored.

    ``quantity`` and ``unit_price`` are copied from the catalog when the
    item is created and never change afterwards (price lock).  The only
    mutations are ``assign_to()`` and the repository filling in ``id``.
    """

    product_id: str
    quantity: Quantity
    unit_price: Money  # locked at billing time
    id: int | None = None
    bill_id: int | None = None

    @staticmethod
    def create(product_id: str, quantity: int, product: Product) -> ProductItem:
        """Snapshot *product* into a new, unassigned line item."""
        qty = Quantity(quantity)
        if product.id != product_id:
            raise ProductMismatchError(
                f"Resolved product '{product.id}' does not match requested "
                f"product '{product_id}'"
            )
        return ProductItem(
            product_id=product_id,
            quantity=qty,
            unit_price=product.price,
        )

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value

    def assign_to(self, bill_id: int) -> None:
        """Attach this item to a bill.  Allowed once; repeats are no-ops."""
        if self.bill_id is None:
            self.bill_id = bill_id
        elif self.bill_id != bill_id:
            raise AlreadyAssignedError(
                f"Item for product '{self.product_id}' already belongs to "
                f"bill #{self.bill_id}"
            )


@dataclass(frozen=True)
class ProductItemView:
    """A line item together with the product it was priced from.

    Lives for one request only.  Repositories never see this type, so a
    reloaded bill has bare ``ProductItem``s and no product.
    """

    item: ProductItem
    product: Product

    @staticmethod
    def create(product_id: str, quantity: int, product: Product) -> ProductItemView:
        return ProductItemView(
            item=ProductItem.create(product_id, quantity, product),
            product=product,
        )

    @property
    def product_id(self) -> str:
        return self.item.product_id

    @property
    def product_name(self) -> str:
        return self.product.name

    @property
    def quantity(self) -> Quantity:
        return self.item.quantity

    @property
    def unit_price(self) -> Money:
        return self.item.unit_price

    @property
    def subtotal(self) -> Money:
        return self.item.subtotal


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50
DEFAULT_CURRENCY = "USD"


@dataclass
class Bill:
    """Aggregate root for customer bills.

    Use ``Bill.open()`` for new bills.  The ``__init__`` is intentionally
    simple so the repository can reconstitute persisted bills without
    re-validating.
    """

    id: int
    customer_id: str
    items: list[ProductItem] = field(default_factory=list)
    status: BillStatus = BillStatus.OPEN
    billing_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finalized_at: datetime | None = None

    # --- Factory (used for NEW bills only) ------------------------------------

    @staticmethod
    def open(bill_id: int, customer_id: str) -> Bill:
        """Start a new, empty bill for *customer_id*."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer ID is required")
        return Bill(id=bill_id, customer_id=customer_id.strip())

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: ProductItem) -> None:
        self.add_items([item])

    def add_items(self, items: list[ProductItem]) -> None:
        """Append *items* in order, or none of them.

        Every item is checked before any is assigned, so a rejected item
        leaves both the bill and the other items untouched.
        """
        self._assert_open()

        if len(self.items) + len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per bill")

        currency = self.items[0].unit_price.currency if self.items else None
        seen: set[int] = {id(existing) for existing in self.items}
        for item in items:
            if currency is None:
                currency = item.unit_price.currency
            elif item.unit_price.currency != currency:
                raise ValidationError(
                    f"Item for product '{item.product_id}' is priced in "
                    f"{item.unit_price.currency}, bill #{self.id} is in {currency}"
                )
            if id(item) in seen:
                raise ValidationError(
                    f"Item for product '{item.product_id}' is already on bill #{self.id}"
                )
            seen.add(id(item))
            if item.bill_id is not None and item.bill_id != self.id:
                raise AlreadyAssignedError(
                    f"Item for product '{item.product_id}' already belongs to "
                    f"bill #{item.bill_id}"
                )

        for item in items:
            item.assign_to(self.id)
            self.items.append(item)

    def finalize(self) -> None:
        """Transition OPEN -> FINALIZED.  The bill is read-only afterwards."""
        self._assert_open()
        if not self.items:
            raise ValidationError("Cannot finalize a bill with no items")
        self.status = BillStatus.FINALIZED
        self.finalized_at = datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def currency(self) -> str:
        """Currency of the first line; an empty bill reports the default."""
        if self.items:
            return self.items[0].unit_price.currency
        return DEFAULT_CURRENCY

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.subtotal
        return result

    @property
    def is_finalized(self) -> bool:
        return self.status == BillStatus.FINALIZED

    @property
    def item_count(self) -> int:
        return len(self.items)

    # --- Internal helpers -----------------------------------------------------

    def _assert_open(self) -> None:
        if self.is_finalized:
            raise BillFinalizedError(f"Bill #{self.id} is finalized and cannot change")
