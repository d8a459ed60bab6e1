"""Application service: List Bills use case (query)."""

from __future__ import annotations

from billing.application.dto import BillSummaryDTO
from billing.application.mapping import bill_to_summary
from billing.domain.repository.bill_repository import BillRepository


class ListBillsHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self) -> list[BillSummaryDTO]:
        return [bill_to_summary(bill) for bill in self._bill_repo.list_all()]
