"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Registry initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tablemint.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tablemint.config.settings import TablemintSettings
    from tablemint.infrastructure.registry import Registry
    from tablemint.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is lazily initialized on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: TablemintSettings) -> None:
        self.settings = settings
        self._registry: Registry | None = None

        from tablemint.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from tablemint.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def registry(self) -> Registry:
        """The registry instance (created lazily on first access)."""
        if self._registry is None:
            from tablemint.infrastructure.registry import Registry

            self._registry = Registry(self.settings)
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Dispose the registry's engine if one was opened."""
        if self._registry is not None:
            self._registry.close()
            self._registry = None
