"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from billing.domain.model.product import Product
from billing.domain.model.value_objects import Money
from billing.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, quantity: int = 0) -> Product:
        """Add a new product to the local catalog under the next "P<n>" ID."""
        product = Product.register(
            product_id=self._next_id(),
            name=name,
            price=Money.of(price),
            quantity=quantity,
        )
        self._product_repo.save(product)

        logger.info("Product added", product_id=product.id, price=str(product.price))
        return product

    def _next_id(self) -> str:
        numbers = [
            int(p.id[1:]) for p in self._product_repo.list_all()
            if p.id.startswith("P") and p.id[1:].isdigit()
        ]
        return f"P{max(numbers) + 1 if numbers else 1}"
