import click

from billing.infrastructure.cli.bill_commands import (
    bill_add_item,
    bill_create,
    bill_finalize,
    bill_list,
    bill_show,
)
from billing.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from billing.infrastructure.log_config import configure_logging
from billing.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """Billing: bills and their line items"""
    configure_logging(get_settings())


@cli.group()
def bill() -> None:
    """Manage bills."""


@cli.group()
def product() -> None:
    """Manage the local product catalog."""


# Register subcommands
bill.add_command(bill_add_item)
bill.add_command(bill_create)
bill.add_command(bill_finalize)
bill.add_command(bill_list)
bill.add_command(bill_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
