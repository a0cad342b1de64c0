"""Product aggregate.

Products live independently of sales. Their price may change in the
catalog at any time; sales are never affected because every sale line
captures its own price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from sales.domain.exceptions import ValidationError
from sales.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Read-only from the point of view of a sale: only ``id``, ``name`` and
    ``price`` are ever consulted.
    """

    id: int
    name: str
    code: str
    price: Money

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing sale lines keep the price they were created with.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
