"""Command: print the metadata locator for an issued identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tablemint.commands._base import TablemintCommand

if TYPE_CHECKING:
    from tablemint.commands._context import AppContext


@click.command(
    cls=TablemintCommand,
    examples="""\
  tablemint resolve 0
  tablemint -q resolve 12
  tablemint resolve 12 --decoded""",
)
@click.argument("identifier", type=click.IntRange(min=0))
@click.option("--decoded", is_flag=True, help="Also show the unencoded query.")
@click.pass_obj
def resolve(app: AppContext, identifier: int, decoded: bool) -> None:
    """Print the metadata locator for IDENTIFIER."""
    from tablemint.services.locator import LocatorBuilder

    app.emit(LocatorBuilder(app.registry).resolve(identifier, decoded=decoded))
