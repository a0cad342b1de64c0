"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from sales.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<10} {'Name':<20} {'Price':>10}")
    click.echo("-" * 49)
    for p in products:
        click.echo(f"{p.id:<6} {p.code:<10} {p.name:<20} {str(p.price):>10}")
