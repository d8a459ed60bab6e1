"""Application service: Update Product price use case."""

from __future__ import annotations

import structlog

from billing.domain.exceptions import ProductNotFoundError
from billing.domain.model.product import Product
from billing.domain.model.value_objects import Money
from billing.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, new_price: str) -> Product:
        """Change a product's catalog price.

        This does NOT affect any existing bills: their line items
        captured a price snapshot at billing time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with ID '{product_id}' not found")

        updated = product.with_price(Money.of(new_price))
        self._product_repo.save(updated)

        logger.info(
            "Product price updated",
            product_id=product_id,
            old_price=str(product.price),
            new_price=str(updated.price),
        )
        return updated
