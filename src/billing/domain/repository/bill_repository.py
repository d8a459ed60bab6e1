"""Abstract repository for the Bill aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from billing.domain.model.bill import Bill


class BillRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique bill ID."""

    @abstractmethod
    def get_by_id(self, bill_id: int) -> Bill | None:
        """Return a bill by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Bill]:
        """Return every bill, oldest first."""

    @abstractmethod
    def save(self, bill: Bill) -> None:
        """Persist a new or updated bill.

        Items without an ``id`` get one here.  Only durable item fields
        are stored; products are never written.
        """
