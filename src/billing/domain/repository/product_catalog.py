"""Catalog lookup used by bill-creation flows."""

from __future__ import annotations

from abc import ABC, abstractmethod

from billing.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def resolve(self, product_id: str) -> Product:
        """Return the current catalog value for *product_id*.

        Raises ProductNotFoundError for an unknown ID and
        CatalogUnavailableError when the catalog cannot be reached.
        Neither is retried here.
        """
