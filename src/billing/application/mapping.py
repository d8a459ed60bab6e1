"""Domain -> DTO mapping shared by the bill use cases."""

from __future__ import annotations

from billing.application.dto import BillDTO, BillLineDTO, BillSummaryDTO
from billing.domain.model.bill import Bill, ProductItemView

_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


def bill_to_dto(bill: Bill, views: list[ProductItemView] | None = None) -> BillDTO:
    """Map *bill* to a DTO.

    *views* are the enriched items built in the current request; lines
    without one (e.g. after a reload) have no product name.
    """
    names = {id(view.item): view.product_name for view in views or []}
    return BillDTO(
        id=bill.id,
        customer_id=bill.customer_id,
        status=bill.status.value,
        items=[
            BillLineDTO(
                product_id=item.product_id,
                product_name=names.get(id(item)),
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in bill.items
        ],
        total=str(bill.total),
        billing_date=bill.billing_date.strftime(_DATE_FORMAT),
        finalized_at=(
            bill.finalized_at.strftime(_DATE_FORMAT) if bill.finalized_at else None
        ),
    )


def bill_to_summary(bill: Bill) -> BillSummaryDTO:
    return BillSummaryDTO(
        id=bill.id,
        customer_id=bill.customer_id,
        status=bill.status.value,
        item_count=bill.item_count,
        total=str(bill.total),
    )
