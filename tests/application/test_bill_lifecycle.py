"""Integration tests for adding to, finalizing, showing and listing bills."""

import pytest

from billing.application.add_bill_item import AddBillItemHandler
from billing.application.create_bill import CreateBillHandler
from billing.application.dto import BillItemSpec
from billing.application.finalize_bill import FinalizeBillHandler
from billing.application.list_bills import ListBillsHandler
from billing.application.show_bill import ShowBillHandler
from billing.domain.exceptions import (
    BillFinalizedError,
    EntityNotFoundError,
    ProductNotFoundError,
)
from billing.domain.model.product import Product
from billing.domain.model.value_objects import Money
from billing.infrastructure.catalog.repository_catalog import RepositoryProductCatalog
from tests.fakes import FakeBillRepository, FakeProductRepository


@pytest.fixture
def bill_repo() -> FakeBillRepository:
    return FakeBillRepository()


@pytest.fixture
def catalog() -> RepositoryProductCatalog:
    return RepositoryProductCatalog(
        FakeProductRepository([
            Product(id="P1", name="Widget", price=Money.of("9.99"), quantity=100),
            Product(id="P2", name="Gadget", price=Money.of("15.00"), quantity=10),
        ])
    )


@pytest.fixture
def bill_id(bill_repo, catalog) -> int:
    dto = CreateBillHandler(bill_repo, catalog).handle("C-1", [BillItemSpec("P1", 3)])
    return dto.id


class TestAddBillItem:

    def test_appends_line_and_updates_total(self, bill_repo, catalog, bill_id):
        dto = AddBillItemHandler(bill_repo, catalog).handle(bill_id, BillItemSpec("P2", 1))
        assert [line.product_id for line in dto.items] == ["P1", "P2"]
        assert dto.total == "$44.97"

    def test_only_the_new_line_has_a_product_name(self, bill_repo, catalog, bill_id):
        dto = AddBillItemHandler(bill_repo, catalog).handle(bill_id, BillItemSpec("P2", 1))
        assert dto.items[0].product_name is None
        assert dto.items[1].product_name == "Gadget"

    def test_unknown_bill_rejected(self, bill_repo, catalog):
        with pytest.raises(EntityNotFoundError, match="Bill #42"):
            AddBillItemHandler(bill_repo, catalog).handle(42, BillItemSpec("P1", 1))

    def test_unknown_product_leaves_bill_unchanged(self, bill_repo, catalog, bill_id):
        with pytest.raises(ProductNotFoundError):
            AddBillItemHandler(bill_repo, catalog).handle(bill_id, BillItemSpec("X", 1))
        assert bill_repo.get_by_id(bill_id).item_count == 1

    def test_finalized_bill_rejects_new_items(self, bill_repo, catalog, bill_id):
        FinalizeBillHandler(bill_repo).handle(bill_id)
        with pytest.raises(BillFinalizedError):
            AddBillItemHandler(bill_repo, catalog).handle(bill_id, BillItemSpec("P2", 1))
        assert bill_repo.get_by_id(bill_id).item_count == 1


class TestFinalizeBill:

    def test_finalize_sets_status(self, bill_repo, bill_id):
        dto = FinalizeBillHandler(bill_repo).handle(bill_id)
        assert dto.status == "FINALIZED"
        assert dto.finalized_at is not None

    def test_unknown_bill_rejected(self, bill_repo):
        with pytest.raises(EntityNotFoundError):
            FinalizeBillHandler(bill_repo).handle(99)


class TestShowAndListBills:

    def test_show_returns_bill(self, bill_repo, bill_id):
        dto = ShowBillHandler(bill_repo).handle(bill_id)
        assert dto.id == bill_id
        assert dto.total == "$29.97"

    def test_show_unknown_bill_rejected(self, bill_repo):
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowBillHandler(bill_repo).handle(99)

    def test_list_summarises_every_bill(self, bill_repo, catalog, bill_id):
        CreateBillHandler(bill_repo, catalog).handle("C-2", [BillItemSpec("P2", 2)])
        summaries = ListBillsHandler(bill_repo).handle()
        assert [(s.customer_id, s.item_count, s.total) for s in summaries] == [
            ("C-1", 1, "$29.97"),
            ("C-2", 1, "$30.00"),
        ]
