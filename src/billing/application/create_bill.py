"""Application service: Create Bill use case.

Orchestrates the flow between the catalog, the repository and the
domain model.  Every product is resolved before the bill is touched,
so a lookup failure never leaves a half-built bill behind.
"""

from __future__ import annotations

import structlog

from billing.application.dto import BillDTO, BillItemSpec
from billing.application.mapping import bill_to_dto
from billing.domain.model.bill import Bill, ProductItemView
from billing.domain.repository.bill_repository import BillRepository
from billing.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class CreateBillHandler:

    def __init__(
        self,
        bill_repo: BillRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._bill_repo = bill_repo
        self._catalog = catalog

    def handle(self, customer_id: str, item_specs: list[BillItemSpec]) -> BillDTO:
        """Create a new bill.

        Steps:
        1. Resolve each product ID through the catalog (fail if missing).
        2. Build line items with *current* prices (snapshot).
        3. Open the bill and let the aggregate validate the items.
        4. Persist and return a DTO.
        """
        views = [
            ProductItemView.create(
                spec.product_id,
                spec.quantity,
                self._catalog.resolve(spec.product_id),
            )
            for spec in item_specs
        ]

        bill = Bill.open(self._bill_repo.next_id(), customer_id)
        bill.add_items([view.item for view in views])
        self._bill_repo.save(bill)

        logger.info(
            "Bill created",
            bill_id=bill.id,
            customer_id=bill.customer_id,
            items=bill.item_count,
            total=str(bill.total),
        )
        return bill_to_dto(bill, views)
