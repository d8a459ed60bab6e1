"""Integration tests for the local catalog use cases."""

import pytest

from billing.application.add_product import AddProductHandler
from billing.application.update_product import UpdateProductHandler
from billing.domain.exceptions import ProductNotFoundError, ValidationError
from billing.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        first = handler.handle("Widget", "9.99", quantity=100)
        second = handler.handle("Gadget", "15.00")
        assert (first.id, second.id) == ("P1", "P2")
        assert repo.get_by_id("P1").quantity == 100

    @pytest.mark.parametrize("price", ["0", "0.00"])
    def test_zero_price_rejected(self, price):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(repo).handle("Widget", price)
        assert repo.list_all() == []

    def test_infinite_price_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            AddProductHandler(FakeProductRepository()).handle("Widget", "inf")

    def test_name_is_stripped(self):
        product = AddProductHandler(FakeProductRepository()).handle("  Widget ", "1.00")
        assert product.name == "Widget"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeProductRepository()).handle("  ", "1.00")


class TestUpdateProduct:

    def test_stores_new_price(self):
        repo = FakeProductRepository()
        AddProductHandler(repo).handle("Widget", "9.99")
        updated = UpdateProductHandler(repo).handle("P1", "19.99")
        assert updated.price == Money.of("19.99")
        assert repo.get_by_id("P1").price == Money.of("19.99")

    def test_unknown_product_rejected(self):
        with pytest.raises(ProductNotFoundError):
            UpdateProductHandler(FakeProductRepository()).handle("P9", "1.00")
