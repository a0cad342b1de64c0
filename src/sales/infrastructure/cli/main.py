import click

from sales.config import get_settings
from sales.infrastructure.bootstrap import configure_logging
from sales.infrastructure.cli.product_commands import product_list
from sales.infrastructure.cli.sale_commands import (
    sale_add,
    sale_create,
    sale_remove,
    sale_show,
)


@click.group()
def cli() -> None:
    """Sales — retail sale management"""
    configure_logging(get_settings().log_level)


@cli.group()
def sale() -> None:
    """Manage sales."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
sale.add_command(sale_create)
sale.add_command(sale_add)
sale.add_command(sale_remove)
sale.add_command(sale_show)
product.add_command(product_list)
