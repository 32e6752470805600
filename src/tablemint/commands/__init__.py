"""Subcommand modules for tablemint.

Provides register_commands() which uses deferred imports to keep
``tablemint --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tablemint.commands.mint import mint
    from tablemint.commands.owner import owner
    from tablemint.commands.resolve import resolve
    from tablemint.commands.supply import supply

    cli.add_command(mint)
    cli.add_command(resolve)
    cli.add_command(supply)
    cli.add_command(owner)
