"""Input collection — turn raw user values into a GratuityInput.

Missing or unparseable values default to 0. Negative values and months
outside [0, 11] are clamped according to the ``[input]`` policy, with a
warning recorded for every adjustment. The calculator itself never
defaults or clamps.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from gratuityctl.config.models import InputConfig
from gratuityctl.domain.gratuity import GratuityInput

logger = logging.getLogger(__name__)

MAX_MONTHS = 11

RawValue = str | int | float | Decimal | None


def parse_decimal(value: RawValue) -> Decimal:
    """Parse *value* as a Decimal, falling back to 0."""
    if value is None:
        return Decimal(0)
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal(0)
    if not parsed.is_finite():
        return Decimal(0)
    return parsed


def parse_months(value: RawValue) -> int:
    """Parse *value* as whole months, truncating any fraction."""
    return int(parse_decimal(value))


def _clamp_negative(name: str, value: Decimal, warnings: list[str]) -> Decimal:
    if value < 0:
        warnings.append(f"{name} was negative ({value}); using 0")
        return Decimal(0)
    return value


def collect_input(
    basic_salary: RawValue,
    years_worked: RawValue,
    months_worked: RawValue = None,
    include_allowances: bool = False,
    allowances: RawValue = None,
    *,
    policy: InputConfig | None = None,
) -> tuple[GratuityInput, list[str]]:
    """Build a :class:`GratuityInput` from raw values.

    Returns the input together with any sanitization warnings.
    """
    policy = policy or InputConfig()
    warnings: list[str] = []

    salary = parse_decimal(basic_salary)
    years = parse_decimal(years_worked)
    months = parse_months(months_worked)
    extra = parse_decimal(allowances) if include_allowances else Decimal(0)

    if policy.clamp_negative:
        salary = _clamp_negative("basic_salary", salary, warnings)
        years = _clamp_negative("years_worked", years, warnings)
        extra = _clamp_negative("allowances", extra, warnings)
        if months < 0:
            warnings.append(f"months_worked was negative ({months}); using 0")
            months = 0

    if policy.clamp_months and months > MAX_MONTHS:
        warnings.append(f"months_worked above {MAX_MONTHS} ({months}); using {MAX_MONTHS}")
        months = MAX_MONTHS

    for warning in warnings:
        logger.debug("Input adjusted: %s", warning)

    data = GratuityInput(
        basic_salary=salary,
        years_worked=years,
        months_worked=months,
        include_allowances=include_allowances,
        allowances=extra,
    )
    return data, warnings
