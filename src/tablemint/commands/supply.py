"""Command: report how many identifiers have been issued."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tablemint.commands._base import TablemintCommand

if TYPE_CHECKING:
    from tablemint.commands._context import AppContext


@click.command(cls=TablemintCommand)
@click.pass_obj
def supply(app: AppContext) -> None:
    """Show the number of identifiers issued so far."""
    from tablemint.services.issuer import IdentifierIssuer

    app.emit(IdentifierIssuer(app.registry).total_issued())
