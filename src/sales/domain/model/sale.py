"""Sale aggregate — the core of the domain.

The Sale is an aggregate root that owns its line items.  A line item has
no identity of its own: it is addressed through the product it refers to,
and a sale holds at most one line per product.
"""

from __future__ import annotations

from dataclasses import dataclass

from sales.domain.exceptions import ValidationError
from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money, Quantity


@dataclass
class SaleLineItem:
    """One product/quantity/price record within a sale.

    ``unit_price`` is captured from the catalog when the line is created
    and never changes afterwards, even when more units are merged in.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at line-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def increase(self, quantity: Quantity) -> None:
        """Merge *quantity* more units into this line."""
        self.quantity = self.quantity + quantity

    @staticmethod
    def for_product(product: Product, quantity: Quantity) -> SaleLineItem:
        return SaleLineItem(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            unit_price=product.price,  # <-- price snapshot
        )


@dataclass
class Sale:
    """Aggregate root for retail sales.

    Use ``Sale.create()`` for new sales.  The ``__init__`` stays simple so
    the repository can reconstitute persisted sales without re-validating.
    """

    id: int | None
    customer: Customer
    items: list[SaleLineItem]

    # --- Factory (used for NEW sales only) ------------------------------------

    @staticmethod
    def create(customer: Customer, items: list[SaleLineItem]) -> Sale:
        """Create a new sale, enforcing one line per product."""
        seen: set[int] = set()
        for item in items:
            if item.product_id in seen:
                raise ValidationError(
                    f"Product #{item.product_id} appears more than once in the sale"
                )
            seen.add(item.product_id)
        return Sale(id=None, customer=customer, items=list(items))

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: Quantity) -> SaleLineItem:
        """Add *quantity* units of *product*.

        Merges into the existing line for the product when there is one,
        otherwise appends a new line priced at the product's current price.
        Returns the affected line.
        """
        line = self.line_for(product.id)
        if line is not None:
            line.increase(quantity)
            return line

        line = SaleLineItem.for_product(product, quantity)
        self.items.append(line)
        return line

    def remove_product(self, product_id: int) -> int:
        """Drop every line referring to *product_id*.

        Returns the number of lines removed; zero is not an error.
        """
        kept = [item for item in self.items if item.product_id != product_id]
        removed = len(self.items) - len(kept)
        self.items = kept
        return removed

    # --- Queries --------------------------------------------------------------

    def line_for(self, product_id: int) -> SaleLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity.value for item in self.items)
