"""Command: look up the owner an identifier was issued to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tablemint.commands._base import TablemintCommand

if TYPE_CHECKING:
    from tablemint.commands._context import AppContext


@click.command(
    cls=TablemintCommand,
    examples="""\
  tablemint owner 0
  tablemint --json owner 7""",
)
@click.argument("identifier", type=click.IntRange(min=0))
@click.pass_obj
def owner(app: AppContext, identifier: int) -> None:
    """Show the owner IDENTIFIER was issued to."""
    from tablemint.services.ownership import OwnershipService

    app.emit(OwnershipService(app.registry).owner_of(identifier))
