"""Command: calculate an end-of-service gratuity."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gratuityctl.commands._base import GratuityCommand

if TYPE_CHECKING:
    from gratuityctl.commands._context import AppContext, ResultConsumer
    from gratuityctl.services.result import ServiceResult


def _summary_echoer(*, err: bool) -> ResultConsumer:
    def echo(result: ServiceResult) -> None:
        from gratuityctl.output.summary import summary_text

        click.echo(err=err)
        click.echo(summary_text(result), err=err)

    return echo


def _summary_writer(path: Path) -> ResultConsumer:
    def write(result: ServiceResult) -> None:
        from gratuityctl.output.summary import summary_text

        path.write_text(summary_text(result) + "\n", encoding="utf-8")

    return write


@click.command(
    cls=GratuityCommand,
    examples="""\
  gratuityctl calculate --salary 10000 --years 3
  gratuityctl calculate --salary 10000 --years 7 --months 6
  gratuityctl calculate --salary 8000 --years 4 --allowances 2500
  gratuityctl calculate --salary 10000 --years 10 --summary
  gratuityctl calculate --salary 10000 --years 10 --summary-file result.txt
  gratuityctl --json calculate --salary 5000 --years 30""",
)
@click.option("--salary", "basic_salary", required=True, help="Basic monthly salary.")
@click.option("--years", "years_worked", default="0", show_default=True, help="Years worked.")
@click.option(
    "--months", "months_worked", default="0", show_default=True, help="Additional months (0-11)."
)
@click.option(
    "--allowances",
    default=None,
    help="Regular monthly allowances to include in the salary basis.",
)
@click.option("--summary", is_flag=True, help="Also print a shareable plain-text summary.")
@click.option(
    "--summary-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the plain-text summary to a file.",
)
@click.pass_obj
def calculate(
    app: AppContext,
    basic_salary: str,
    years_worked: str,
    months_worked: str,
    allowances: str | None,
    summary: bool,
    summary_file: Path | None,
) -> None:
    """Calculate end-of-service gratuity under UAE labour law."""
    from gratuityctl.services.gratuity import GratuityService

    result = GratuityService(app.settings).calculate(
        basic_salary,
        years_worked,
        months_worked,
        include_allowances=allowances is not None,
        allowances=allowances,
    )

    consumers: list[ResultConsumer] = []
    if summary:
        # stdout stays machine-readable under --json and --quiet.
        machine = app.settings.json_output or app.settings.quiet
        consumers.append(_summary_echoer(err=machine))
    if summary_file is not None:
        consumers.append(_summary_writer(summary_file))
    app.deliver(result, consumers)
