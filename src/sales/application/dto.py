"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from sales.domain.model.sale import Sale


@dataclass(frozen=True)
class SaleLineItemDTO:
    """Output: a single sale line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "2.50"
    line_total: str


@dataclass(frozen=True)
class SaleDTO:
    """Output: a complete sale as displayed to the user."""

    id: int
    customer_dni: str
    customer_name: str
    items: list[SaleLineItemDTO]
    total: str


def sale_to_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,  # type: ignore[arg-type]
        customer_dni=sale.customer.dni,
        customer_name=sale.customer.name,
        items=[
            SaleLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in sale.items
        ],
        total=str(sale.total),
    )
