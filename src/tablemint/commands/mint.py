"""Command: issue the next identifier to an owner."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tablemint.commands._base import TablemintCommand

if TYPE_CHECKING:
    from tablemint.commands._context import AppContext


@click.command(
    cls=TablemintCommand,
    examples="""\
  tablemint mint alice
  tablemint --json mint 0x71C7656EC7ab88b098defB751B7401B5f6d8976F
  tablemint -q mint bob""",
)
@click.argument("owner")
@click.pass_obj
def mint(app: AppContext, owner: str) -> None:
    """Issue the next sequential identifier to OWNER."""
    from tablemint.services.issuer import IdentifierIssuer

    app.emit(IdentifierIssuer(app.registry).mint(owner))
