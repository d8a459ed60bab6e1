"""CLI commands for the Bill aggregate."""

from __future__ import annotations

import click

from billing.application.add_bill_item import AddBillItemHandler
from billing.application.create_bill import CreateBillHandler
from billing.application.dto import BillDTO, BillItemSpec
from billing.application.finalize_bill import FinalizeBillHandler
from billing.application.list_bills import ListBillsHandler
from billing.application.show_bill import ShowBillHandler
from billing.domain.exceptions import DomainException
from billing.infrastructure.bootstrap import bill_repository, product_catalog


def _parse_item(pair: str) -> BillItemSpec:
    """Parse 'P1:3' into a BillItemSpec."""
    pair = pair.strip()
    if ":" not in pair:
        raise click.BadParameter(
            f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
        )
    product_id, qty_str = pair.rsplit(":", 1)
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for product '{product_id}'."
        )
    return BillItemSpec(product_id=product_id.strip(), quantity=qty)


def _parse_items(raw: str) -> list[BillItemSpec]:
    """Parse 'P1:3,P2:5' into a BillItemSpec list."""
    return [_parse_item(pair) for pair in raw.split(",")]


def _display_bill(dto: BillDTO) -> None:
    """Shared formatting for displaying a bill."""
    click.echo(f"Bill #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Billed:   {dto.billing_date}")
    if dto.finalized_at:
        click.echo(f"Final:    {dto.finalized_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        label = item.product_name or item.product_id
        click.echo(
            f"  {label:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Bill Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--items", default="", help="Items as 'ProductId:Qty,ProductId:Qty'.")
def bill_create(customer: str, items: str) -> None:
    """Create a new bill, priced from the current catalog."""
    specs = _parse_items(items) if items.strip() else []

    handler = CreateBillHandler(
        bill_repo=bill_repository(),
        catalog=product_catalog(),
    )

    try:
        dto = handler.handle(customer_id=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bill #{dto.id} created")
    _display_bill(dto)


@click.command("add-item")
@click.option("--id", "bill_id", required=True, type=int, help="Bill ID.")
@click.option("--item", required=True, help="Item as 'ProductId:Qty'.")
def bill_add_item(bill_id: int, item: str) -> None:
    """Add a line item to an open bill."""
    spec = _parse_item(item)

    handler = AddBillItemHandler(
        bill_repo=bill_repository(),
        catalog=product_catalog(),
    )

    try:
        dto = handler.handle(bill_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_bill(dto)


@click.command("finalize")
@click.option("--id", "bill_id", required=True, type=int, help="Bill ID to finalize.")
def bill_finalize(bill_id: int) -> None:
    """Finalize a bill (no further changes allowed)."""
    handler = FinalizeBillHandler(bill_repo=bill_repository())

    try:
        dto = handler.handle(bill_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bill #{dto.id} finalized, total {dto.total}.")


@click.command("show")
@click.option("--id", "bill_id", required=True, type=int, help="Bill ID to display.")
def bill_show(bill_id: int) -> None:
    """Show details of an existing bill."""
    handler = ShowBillHandler(bill_repo=bill_repository())

    try:
        dto = handler.handle(bill_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_bill(dto)


@click.command("list")
def bill_list() -> None:
    """List all bills."""
    summaries = ListBillsHandler(bill_repo=bill_repository()).handle()

    if not summaries:
        click.echo("No bills found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Status':<10} {'Items':>5} {'Total':>12}")
    click.echo("-" * 57)
    for s in summaries:
        click.echo(
            f"{s.id:<6} {s.customer_id:<20} {s.status:<10} {s.item_count:>5} {s.total:>12}"
        )
