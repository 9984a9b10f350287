"""Plain-text summary of a gratuity result, suitable for sharing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gratuityctl.domain.money import format_money, to_decimal
from gratuityctl.output.renderers import currency_of, format_service_years

if TYPE_CHECKING:
    from gratuityctl.services.result import ServiceResult

SUMMARY_TITLE = "UAE Gratuity Calculation Results:"
SUMMARY_FOOTER = "Calculated using UAE Labor Law regulations"
SUMMARY_SOURCE = "Source: UAE Gratuity Calculator"


def summary_text(result: ServiceResult) -> str:
    """Build the shareable summary for a successful calculation.

    Raises:
        ValueError: *result* is a failure.
    """
    if not result.ok:
        msg = f"No summary for failed operation {result.op!r}"
        raise ValueError(msg)

    d = result.data
    currency = currency_of(result)
    return "\n".join(
        [
            SUMMARY_TITLE,
            f"Total Gratuity: {format_money(to_decimal(d['total_gratuity']), currency)}",
            f"Service Period: {format_service_years(d['service_years'])}",
            f"Monthly Salary: {format_money(to_decimal(d['monthly_salary_basis']), currency)}",
            "",
            SUMMARY_FOOTER,
            SUMMARY_SOURCE,
        ]
    )
