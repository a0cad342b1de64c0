"""CLI commands for the Sale aggregate."""

from __future__ import annotations

import click

from sales.application.dto import SaleDTO, sale_to_dto
from sales.application.show_sale import ShowSaleHandler
from sales.domain.exceptions import DomainException
from sales.domain.model.customer import Customer
from sales.infrastructure.bootstrap import sale_repository, sale_service


def _parse_items(raw: str) -> dict[int, int]:
    """Parse '1:3,2:5' into {product_id: quantity}.

    Every quantity must be positive; repeated product ids are then summed.
    """
    result: dict[int, int] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
        if qty <= 0:
            raise click.BadParameter(
                f"Invalid quantity in '{pair}'. Quantity must be positive."
            )
        result[product_id] = result.get(product_id, 0) + qty
    return result


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for displaying a sale."""
    click.echo(f"Sale #{dto.id}")
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_dni})")
    click.echo()

    if not dto.items:
        click.echo("  (no items)")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Sale Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--dni", required=True, help="Customer national id.")
@click.option("--name", required=True, help="Customer full name.")
@click.option("--email", default="", help="Customer email.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def sale_create(dni: str, name: str, email: str, items: str) -> None:
    """Create a new sale."""
    requested = _parse_items(items)
    customer = Customer(dni=dni, name=name, email=email)

    try:
        sale = sale_service().create_sale(requested, customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(sale_to_dto(sale))


@click.command("add")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def sale_add(sale_id: int, product_id: int, quantity: int) -> None:
    """Add a product to an existing sale."""
    try:
        sale = sale_service().add_product(sale_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if sale is None:
        raise click.ClickException(f"Sale #{sale_id} or product #{product_id} not found")

    _display_sale(sale_to_dto(sale))


@click.command("remove")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
def sale_remove(sale_id: int, product_id: int) -> None:
    """Remove a product (all of its units) from a sale."""
    try:
        sale = sale_service().remove_product(sale_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if sale is None:
        raise click.ClickException(f"Sale #{sale_id} or product #{product_id} not found")

    _display_sale(sale_to_dto(sale))


@click.command("show")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to display.")
def sale_show(sale_id: int) -> None:
    """Show details of an existing sale."""
    handler = ShowSaleHandler(sale_repo=sale_repository())

    try:
        dto = handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)
