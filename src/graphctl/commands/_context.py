"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the configured GraphService and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.config.logging import configure_logging
from graphctl.output.formatters import OutputSettings, format_result
from graphctl.services.graph import GraphService
from graphctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from graphctl.config.settings import GraphSettings
    from graphctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GraphSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def service(self) -> GraphService:
        return GraphService(self.settings.input)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr, and only with ``--verbose``; the JSON
          payload always carries them.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            infinity=self.settings.output.infinity_symbol,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.verbose and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
