"""JSON-file-backed product catalog."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money
from sales.domain.repository.product_repository import ProductRepository
from sales.infrastructure.persistence.json_file import JsonRecordFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonRecordFile(file_path)

    def get_by_id(self, product_id: int) -> Product | None:
        raw = self._file.find("id", product_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, product: Product) -> None:
        self._file.upsert("id", {
            "id": product.id,
            "name": product.name,
            "code": product.code,
            "price": str(product.price.amount),
        })

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        # Prices are kept as strings so the Decimal survives unchanged
        return Product(
            id=raw["id"],
            name=raw["name"],
            code=raw.get("code", ""),
            price=Money(Decimal(raw["price"])),
        )
