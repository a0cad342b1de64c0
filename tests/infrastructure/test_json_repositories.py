"""Tests for the JSON-file repositories, against a temporary directory."""

import json

from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.sale import Sale, SaleLineItem
from sales.domain.model.value_objects import Money, Quantity
from sales.infrastructure.persistence.json_file import JsonRecordFile
from sales.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from sales.infrastructure.persistence.json_sale_repository import JsonSaleRepository

CUSTOMER = Customer(dni="00000000F", name="Cliente 1", email="cliente@cliente.cli")


def _product(price: str = "2.50") -> Product:
    return Product(id=1, name="Desodorante", code="D-1", price=Money.of(price))


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert path.exists()
        assert repo.list_all() == []

    def test_save_and_get(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product())
        assert repo.get_by_id(1) == _product()
        assert repo.get_by_id(2) is None

    def test_save_overwrites_price(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("2.50"))
        repo.save(_product("5.00"))
        assert len(repo.list_all()) == 1
        assert repo.get_by_id(1).price == Money.of("5.00")


class TestJsonSaleRepository:

    def test_assigns_ids(self, tmp_path):
        repo = JsonSaleRepository(tmp_path / "sales.json")
        first = Sale.create(CUSTOMER, [])
        second = Sale.create(CUSTOMER, [])
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)
        assert repo.next_id() == 3

    def test_round_trip_keeps_decimal_price(self, tmp_path):
        repo = JsonSaleRepository(tmp_path / "sales.json")
        sale = Sale.create(CUSTOMER, [SaleLineItem.for_product(_product("2.50"), Quantity(2))])
        repo.save(sale)

        loaded = repo.get_by_id(sale.id)
        assert loaded == sale
        raw = json.loads((tmp_path / "sales.json").read_text(encoding="utf-8"))
        assert raw[0]["items"][0]["unit_price"] == "2.50"

    def test_update_replaces_record(self, tmp_path):
        repo = JsonSaleRepository(tmp_path / "sales.json")
        sale = Sale.create(CUSTOMER, [SaleLineItem.for_product(_product(), Quantity(1))])
        repo.save(sale)

        sale.remove_product(1)
        repo.save(sale)

        raw = json.loads((tmp_path / "sales.json").read_text(encoding="utf-8"))
        assert len(raw) == 1
        assert repo.get_by_id(sale.id).items == []

    def test_missing_sale(self, tmp_path):
        repo = JsonSaleRepository(tmp_path / "sales.json")
        assert repo.get_by_id(1) is None


class TestJsonRecordFile:

    def test_upsert_replaces_in_place(self, tmp_path):
        records = JsonRecordFile(tmp_path / "records.json")
        records.upsert("id", {"id": 1, "name": "a"})
        records.upsert("id", {"id": 2, "name": "b"})
        records.upsert("id", {"id": 1, "name": "c"})
        assert records.read() == [{"id": 1, "name": "c"}, {"id": 2, "name": "b"}]

    def test_find(self, tmp_path):
        records = JsonRecordFile(tmp_path / "records.json")
        records.write([{"id": 1}, {"id": 2}])
        assert records.find("id", 2) == {"id": 2}
        assert records.find("id", 3) is None
