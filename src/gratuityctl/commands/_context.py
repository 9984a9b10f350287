"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to commands via
``@click.pass_obj``.  Owns logging setup and result delivery: a command
builds an explicit, ordered list of result consumers and the context
runs them one after another.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click

from gratuityctl.output.formatters import OutputSettings, format_result
from gratuityctl.services.result import ServiceResult

if TYPE_CHECKING:
    from gratuityctl.config.settings import GratuitySettings

ResultConsumer = Callable[[ServiceResult], None]


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GratuitySettings) -> None:
        self.settings = settings

        from gratuityctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.display.width,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def deliver(self, result: ServiceResult, consumers: Sequence[ResultConsumer] = ()) -> None:
        """Emit *result*, then hand it to each of *consumers* in order.

        A failed result stops at :meth:`emit` (exit code 1), so later
        consumers only ever see successful results.
        """
        for consumer in (self.emit, *consumers):
            consumer(result)
