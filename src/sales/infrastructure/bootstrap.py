"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import sys

from sales.application.sale_service import SaleService
from sales.config import Settings, get_settings
from sales.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from sales.infrastructure.persistence.json_sale_repository import (
    JsonSaleRepository,
)


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.data_dir / "products.json")


def sale_repository(settings: Settings | None = None) -> JsonSaleRepository:
    settings = settings or get_settings()
    return JsonSaleRepository(settings.data_dir / "sales.json")


def sale_service(settings: Settings | None = None) -> SaleService:
    settings = settings or get_settings()
    return SaleService(
        sale_repo=sale_repository(settings),
        product_repo=product_repository(settings),
    )
