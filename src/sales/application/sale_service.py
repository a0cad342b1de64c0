"""Application service: sale mutations.

Creates sales, adds products to them and removes products from them.
Every operation is a short load / mutate / save sequence against the
product catalog and the sale store.

Two failure policies coexist on purpose:

- ``create_sale`` is all-or-nothing.  An unknown product raises
  ``ProductNotFoundError`` and nothing is written.
- ``add_product`` and ``remove_product`` treat a missing sale or product
  as an ordinary negative lookup and return ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sales.domain.exceptions import ProductNotFoundError
from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.sale import Sale, SaleLineItem
from sales.domain.model.value_objects import Quantity
from sales.domain.repository.product_repository import ProductRepository
from sales.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class SaleService:

    def __init__(
        self,
        sale_repo: SaleRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._sale_repo = sale_repo
        self._product_repo = product_repo

    def create_sale(
        self,
        requested_items: Mapping[int, int],
        customer: Customer,
    ) -> Sale:
        """Open a new sale for *customer*.

        Steps:
        1. Validate every requested quantity.
        2. Resolve every product id (fail on the first unknown one).
        3. Build one line per product with its *current* price (snapshot).
        4. Persist once and return the stored sale.

        Lines follow the iteration order of *requested_items*.
        """
        quantities = [
            (product_id, Quantity(qty)) for product_id, qty in requested_items.items()
        ]

        line_items: list[SaleLineItem] = []
        for product_id, quantity in quantities:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                logger.warning(
                    "Sale for customer %s rejected: product #%s not found",
                    customer.dni,
                    product_id,
                )
                raise ProductNotFoundError(product_id)
            line_items.append(SaleLineItem.for_product(product, quantity))

        sale = Sale.create(customer=customer, items=line_items)
        self._sale_repo.save(sale)

        logger.info(
            "Created sale #%s for customer %s with %d line(s)",
            sale.id,
            customer.dni,
            len(sale.items),
        )
        return sale

    def add_product(self, sale_id: int, product_id: int, quantity: int) -> Sale | None:
        """Add *quantity* units of a product to an existing sale.

        Merges into the product's existing line if the sale already has
        one.  Returns None when the sale or the product does not exist.
        """
        qty = Quantity(quantity)

        resolved = self._resolve(sale_id, product_id)
        if resolved is None:
            return None
        sale, product = resolved

        line = sale.add_item(product, qty)
        self._sale_repo.save(sale)

        logger.info(
            "Added %d x product #%s to sale #%s (line quantity now %d)",
            qty.value,
            product_id,
            sale_id,
            line.quantity.value,
        )
        return sale

    def remove_product(self, sale_id: int, product_id: int) -> Sale | None:
        """Remove every line for a product from an existing sale.

        Removing a product the sale does not contain saves the sale
        unchanged.  Returns None when the sale or the product does not
        exist.
        """
        resolved = self._resolve(sale_id, product_id)
        if resolved is None:
            return None
        sale, _ = resolved

        removed = sale.remove_product(product_id)
        self._sale_repo.save(sale)

        logger.info(
            "Removed product #%s from sale #%s (%d line(s) dropped)",
            product_id,
            sale_id,
            removed,
        )
        return sale

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, sale_id: int, product_id: int) -> tuple[Sale, Product] | None:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            logger.info("Sale #%s not found", sale_id)
            return None

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("Product #%s not found (sale #%s)", product_id, sale_id)
            return None

        return sale, product
