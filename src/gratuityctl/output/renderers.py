"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gratuityctl.domain.money import format_money, money, to_decimal
from gratuityctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from gratuityctl.services.result import ServiceResult

DEFAULT_CURRENCY = "AED"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    total = result.data.get("total_gratuity")
    if total is not None:
        return format_money(to_decimal(total), currency_of(result))

    return f"OK: {result.op}"


def currency_of(result: ServiceResult) -> str:
    """Currency label recorded in ``result.meta``, defaulting to AED."""
    if result.meta:
        return str(result.meta.get("currency", DEFAULT_CURRENCY))
    return DEFAULT_CURRENCY


def format_service_years(value: Any) -> str:
    """Format a service duration as ``3.00 years``."""
    return f"{money(to_decimal(value))} years"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="grat.ok")
    op = Text(f"  {result.op}", style="grat.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="grat.key")
    v = Text(str(value), style=style)
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if isinstance(v, dict):
            v = _json.dumps(v, separators=(",", ":"))
        console.print(f"    {k}: {v}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="grat.error")
    op = Text(f"  {result.op}", style="grat.op")
    console.print(label, op, Text(" — "), Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Gratuity renderer ─────────────────────────────────────────────────


def _breakdown_table(lines: list[dict[str, Any]], total: Any, currency: str) -> Table:
    """Build the breakdown table; the cap adjustment row is highlighted."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Description", no_wrap=True)
    table.add_column("Calculation", style="dim")
    table.add_column("Amount", justify="right", no_wrap=True)

    for line in lines:
        amount = format_money(to_decimal(line["amount"]), currency)
        if line.get("is_cap_adjustment"):
            table.add_row(
                Text(line["description"], style="grat.warning"),
                line["calculation_text"],
                Text(amount, style="grat.warning"),
            )
        else:
            table.add_row(line["description"], line["calculation_text"], amount)

    table.add_section()
    table.add_row(
        Text("Total Gratuity Amount", style="grat.heading"),
        "",
        Text(format_money(to_decimal(total), currency), style="grat.total"),
    )
    return table


def _render_gratuity(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render calculate_gratuity: summary fields, then the breakdown."""
    d = result.data
    currency = currency_of(result)

    _status_line(console, result)
    _field(
        console,
        "Total Gratuity",
        format_money(to_decimal(d["total_gratuity"]), currency),
        style="grat.total",
    )
    _field(console, "Service Period", format_service_years(d["service_years"]))
    _field(
        console,
        "Monthly Salary",
        format_money(to_decimal(d["monthly_salary_basis"]), currency),
        style="grat.amount",
    )
    if d.get("was_capped"):
        _field(
            console,
            "Capped At",
            format_money(to_decimal(d["cap_amount"]), currency),
            style="grat.warning",
        )

    console.print()
    console.print(Text("Calculation Breakdown:", style="grat.heading"))
    console.print(_breakdown_table(d.get("breakdown", []), d["total_gratuity"], currency))

    if verbose:
        _field(console, "Daily Salary", format_money(to_decimal(d["daily_salary"]), currency))
        _field(console, "Raw Gratuity", format_money(to_decimal(d["raw_gratuity"]), currency))
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "calculate_gratuity": _render_gratuity,
}
