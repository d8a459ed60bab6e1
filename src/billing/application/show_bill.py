"""Application service: Show Bill use case (query)."""

from __future__ import annotations

from billing.application.dto import BillDTO
from billing.application.mapping import bill_to_dto
from billing.domain.exceptions import EntityNotFoundError
from billing.domain.repository.bill_repository import BillRepository


class ShowBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self, bill_id: int) -> BillDTO:
        bill = self._bill_repo.get_by_id(bill_id)
        if bill is None:
            raise EntityNotFoundError(f"Bill #{bill_id} not found")
        return bill_to_dto(bill)
