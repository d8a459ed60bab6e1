"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from billing.infrastructure.catalog.repository_catalog import RepositoryProductCatalog
from billing.infrastructure.persistence.json_bill_repository import (
    JsonBillRepository,
)
from billing.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from billing.infrastructure.settings import get_settings


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().products_file)


def product_catalog() -> RepositoryProductCatalog:
    return RepositoryProductCatalog(product_repository())


def bill_repository() -> JsonBillRepository:
    return JsonBillRepository(get_settings().bills_file)
