"""ProductCatalog backed by a ProductRepository.

Stands in for a remote catalog service: an unknown ID becomes
ProductNotFoundError, and a store that cannot be read becomes
CatalogUnavailableError.  Nothing is retried.
"""

from __future__ import annotations

import structlog

from billing.domain.exceptions import CatalogUnavailableError, ProductNotFoundError
from billing.domain.model.product import Product
from billing.domain.repository.product_catalog import ProductCatalog
from billing.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RepositoryProductCatalog(ProductCatalog):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def resolve(self, product_id: str) -> Product:
        try:
            product = self._product_repo.get_by_id(product_id)
        except (OSError, ValueError) as exc:
            logger.error("Catalog lookup failed", product_id=product_id, error=str(exc))
            raise CatalogUnavailableError(
                f"Product catalog unavailable while resolving '{product_id}'"
            ) from exc

        if product is None:
            raise ProductNotFoundError(f"Product not found: '{product_id}'")

        logger.debug("Product resolved", product_id=product.id, price=str(product.price))
        return product
