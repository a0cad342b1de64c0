"""Unit tests for the Sale aggregate and its merge/removal rules."""

import pytest

from sales.domain.exceptions import ValidationError
from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.sale import Sale, SaleLineItem
from sales.domain.model.value_objects import Money, Quantity

CUSTOMER = Customer(dni="00000000F", name="Cliente 1", email="cliente@cliente.cli")


def _product(product_id: int = 1, name: str = "Desodorante", price: str = "2.50") -> Product:
    return Product(id=product_id, name=name, code=str(product_id), price=Money.of(price))


def _line(product: Product, qty: int = 1) -> SaleLineItem:
    return SaleLineItem.for_product(product, Quantity(qty))


class TestSaleCreation:

    def test_happy_path(self):
        sale = Sale.create(CUSTOMER, [_line(_product(), 2)])
        assert sale.id is None  # assigned by repository
        assert sale.customer == CUSTOMER
        assert len(sale.items) == 1
        assert sale.total == Money.of("5.00")

    def test_empty_sale_allowed(self):
        sale = Sale.create(CUSTOMER, [])
        assert sale.items == []
        assert sale.total == Money.zero()

    def test_duplicate_product_lines_rejected(self):
        p = _product()
        with pytest.raises(ValidationError, match="more than once"):
            Sale.create(CUSTOMER, [_line(p), _line(p)])

    def test_items_list_is_copied(self):
        items = [_line(_product())]
        sale = Sale.create(CUSTOMER, items)
        items.clear()
        assert len(sale.items) == 1


class TestAddItem:

    def test_new_product_appends_line_at_current_price(self):
        sale = Sale.create(CUSTOMER, [_line(_product(1))])
        line = sale.add_item(_product(2, "Champu", "4.00"), Quantity(3))
        assert [i.product_id for i in sale.items] == [1, 2]
        assert line.unit_price == Money.of("4.00")
        assert line.quantity == Quantity(3)

    def test_existing_product_merges_quantities(self):
        p = _product()
        sale = Sale.create(CUSTOMER, [_line(p, 2)])
        sale.add_item(p, Quantity(1))
        assert len(sale.items) == 1
        assert sale.items[0].quantity == Quantity(3)

    def test_merge_keeps_captured_price(self):
        p = _product(price="2.50")
        sale = Sale.create(CUSTOMER, [_line(p, 1)])
        p.update_price(Money.of("5.00"))
        sale.add_item(p, Quantity(1))
        assert sale.items[0].unit_price == Money.of("2.50")
        assert sale.total == Money.of("5.00")


class TestRemoveProduct:

    def test_removes_line(self):
        sale = Sale.create(CUSTOMER, [_line(_product(1)), _line(_product(2))])
        assert sale.remove_product(1) == 1
        assert [i.product_id for i in sale.items] == [2]

    def test_removes_every_line_for_product(self):
        p = _product()
        # Reconstituted data may hold several lines for one product
        sale = Sale(id=1, customer=CUSTOMER, items=[_line(p), _line(p), _line(_product(2))])
        assert sale.remove_product(p.id) == 2
        assert sale.line_for(p.id) is None
        assert len(sale.items) == 1

    def test_absent_product_is_noop(self):
        sale = Sale.create(CUSTOMER, [_line(_product(1))])
        assert sale.remove_product(99) == 0
        assert len(sale.items) == 1


class TestLineItem:

    def test_line_total(self):
        assert _line(_product(price="2.50"), 3).line_total == Money.of("7.50")

    def test_price_is_snapshot(self):
        p = _product(price="2.50")
        line = _line(p)
        p.update_price(Money.of("5.00"))
        assert line.unit_price == Money.of("2.50")

    def test_item_count(self):
        sale = Sale.create(CUSTOMER, [_line(_product(1), 2), _line(_product(2), 5)])
        assert sale.item_count == 7


class TestProduct:

    def test_update_price_rejects_zero(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _product().update_price(Money.of("0"))
