"""Abstract store behind the local product catalog.

Billing reads it through ProductCatalog; only the catalog use cases
(add a product, change its price) write to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from billing.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return the stored product, or None.

        Raises OSError when the store cannot be read and ValueError when
        the stored record is malformed.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, in stored order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store *product*, replacing any earlier version with the same ID."""
