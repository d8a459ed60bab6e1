"""JSON-file-backed implementation of BillRepository.

Prices are written as decimal strings so no precision is lost on
the round trip.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from billing.domain.model.bill import Bill, BillStatus, ProductItem
from billing.domain.model.value_objects import Money, Quantity
from billing.domain.repository.bill_repository import BillRepository


class JsonBillRepository(BillRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BillRepository interface ---------------------------------------------

    def next_id(self) -> int:
        bills = self._load_raw()
        if not bills:
            return 1
        return max(b["id"] for b in bills) + 1

    def get_by_id(self, bill_id: int) -> Bill | None:
        for raw in self._load_raw():
            if raw["id"] == bill_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Bill]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, bill: Bill) -> None:
        bills = self._load_raw()

        next_item_id = 1 + max(
            (i["id"] for b in bills for i in b["items"]), default=0
        )
        for item in bill.items:
            if item.id is None:
                item.id = next_item_id
                next_item_id += 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(bills):
            if raw["id"] == bill.id:
                bills[i] = self._to_raw(bill)
                break
        else:
            bills.append(self._to_raw(bill))

        self._persist_raw(bills)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(bill: Bill) -> dict:
        return {
            "id": bill.id,
            "customer_id": bill.customer_id,
            "status": bill.status.value,
            "billing_date": bill.billing_date.isoformat(),
            "finalized_at": bill.finalized_at.isoformat() if bill.finalized_at else None,
            "items": [
                {
                    "id": item.id,
                    "bill_id": item.bill_id,
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in bill.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Bill:
        items = [
            ProductItem(
                id=i["id"],
                bill_id=i["bill_id"],
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        finalized_at = raw.get("finalized_at")
        return Bill(
            id=raw["id"],
            customer_id=raw["customer_id"],
            items=items,
            status=BillStatus(raw["status"]),
            billing_date=datetime.fromisoformat(raw["billing_date"]),
            finalized_at=datetime.fromisoformat(finalized_at) if finalized_at else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, bills: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(bills, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
