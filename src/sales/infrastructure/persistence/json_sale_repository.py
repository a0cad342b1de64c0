"""JSON-file-backed sale store.

Each sale is one record with its customer and line items nested inside.
Writes are last-writer-wins.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from sales.domain.model.customer import Customer
from sales.domain.model.sale import Sale, SaleLineItem
from sales.domain.model.value_objects import Money, Quantity
from sales.domain.repository.sale_repository import SaleRepository
from sales.infrastructure.persistence.json_file import JsonRecordFile


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    def next_id(self) -> int:
        return max((raw["id"] for raw in self._file.read()), default=0) + 1

    def get_by_id(self, sale_id: int) -> Sale | None:
        raw = self._file.find("id", sale_id)
        return self._to_domain(raw) if raw is not None else None

    def save(self, sale: Sale) -> None:
        if sale.id is None:
            sale.id = self.next_id()
        self._file.upsert("id", self._to_raw(sale))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        customer = sale.customer
        return {
            "id": sale.id,
            "customer": {"dni": customer.dni, "name": customer.name, "email": customer.email},
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        customer = raw["customer"]
        return Sale(
            id=raw["id"],
            customer=Customer(
                dni=customer["dni"],
                name=customer["name"],
                email=customer.get("email", ""),
            ),
            items=[
                SaleLineItem(
                    product_id=line["product_id"],
                    product_name=line["product_name"],
                    quantity=Quantity(line["quantity"]),
                    unit_price=Money(Decimal(line["unit_price"])),
                )
                for line in raw["items"]
            ],
        )
