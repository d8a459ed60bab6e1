"""Application service: Add Item to an open bill."""

from __future__ import annotations

import structlog

from billing.application.dto import BillDTO, BillItemSpec
from billing.application.mapping import bill_to_dto
from billing.domain.exceptions import EntityNotFoundError
from billing.domain.model.bill import ProductItemView
from billing.domain.repository.bill_repository import BillRepository
from billing.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class AddBillItemHandler:

    def __init__(
        self,
        bill_repo: BillRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._bill_repo = bill_repo
        self._catalog = catalog

    def handle(self, bill_id: int, spec: BillItemSpec) -> BillDTO:
        bill = self._bill_repo.get_by_id(bill_id)
        if bill is None:
            raise EntityNotFoundError(f"Bill #{bill_id} not found")

        product = self._catalog.resolve(spec.product_id)
        view = ProductItemView.create(spec.product_id, spec.quantity, product)

        bill.add_item(view.item)
        self._bill_repo.save(bill)

        logger.info(
            "Bill item added",
            bill_id=bill.id,
            product_id=view.product_id,
            quantity=view.quantity.value,
            unit_price=str(view.unit_price),
        )
        return bill_to_dto(bill, [view])
