"""JSON-file-backed product store.

The file holds one object keyed by product ID::

    {"P1": {"name": "Widget", "price": "9.99", "currency": "USD", "stock": 100}}

Prices are decimal strings.  Anything that does not decode to a valid
Product surfaces as ValueError, which the catalog reports as unavailable.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from billing.domain.exceptions import ValidationError
from billing.domain.model.product import Product
from billing.domain.model.value_objects import Money
from billing.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write({})

    def get_by_id(self, product_id: str) -> Product | None:
        records = self._read()
        if product_id not in records:
            return None
        return self._decode(product_id, records[product_id])

    def list_all(self) -> list[Product]:
        return [self._decode(pid, record) for pid, record in self._read().items()]

    def save(self, product: Product) -> None:
        records = self._read()
        records[product.id] = {
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.quantity,
        }
        self._write(records)

    # --- Encoding -------------------------------------------------------------

    @staticmethod
    def _decode(product_id: str, record: dict) -> Product:
        try:
            return Product(
                id=product_id,
                name=record["name"],
                price=Money(Decimal(record["price"]), record.get("currency", "USD")),
                quantity=record.get("stock", 0),
            )
        except (KeyError, TypeError, ArithmeticError, ValidationError) as exc:
            raise ValueError(f"Corrupt product record '{product_id}': {exc!r}") from exc

    def _read(self) -> dict[str, dict]:
        data = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self._file_path} does not hold a product mapping")
        return data

    def _write(self, records: dict[str, dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
