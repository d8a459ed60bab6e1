"""Product catalog value.

Products belong to the catalog, not to billing. Billing only ever sees a
read of catalog state at a point in time, so the value is frozen: a price
change in the catalog produces a new Product rather than mutating one that
a bill may still be holding.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from billing.domain.exceptions import ValidationError
from billing.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product as read from the catalog.

    ``price`` and ``quantity`` are *live* values: the current unit price
    and the stock currently available.  Reads accept any non-negative
    price; ``register()`` and ``with_price()`` are the catalog's own
    writes and require a price above zero.
    """

    id: str
    name: str
    price: Money
    quantity: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product ID is required")
        if not isinstance(self.quantity, int) or self.quantity < 0:
            raise ValidationError(
                f"Product stock must be a non-negative integer, got {self.quantity!r}"
            )

    @staticmethod
    def register(product_id: str, name: str, price: Money, quantity: int = 0) -> Product:
        """Create a new catalog entry."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        _assert_listable(price)
        return Product(id=product_id, name=name.strip(), price=price, quantity=quantity)

    def with_price(self, new_price: Money) -> Product:
        """Return the catalog's next version of this product.

        Existing bills are not affected: their line items copied the
        price they were sold at.
        """
        _assert_listable(new_price)
        return replace(self, price=new_price)


def _assert_listable(price: Money) -> None:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
