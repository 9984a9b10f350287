"""End-of-service gratuity under the UAE tiered scheme.

Accrual is 21 days of salary per year for the first five years and
30 days per year beyond that, on a 30-day month. Service shorter than one
year earns nothing. The total is capped at two years' salary.

``compute`` is pure: no I/O, no logging, no shared state.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from gratuityctl.domain.money import format_money, money

# --- Scheme constants ---

DAYS_PER_MONTH = Decimal(30)
MONTHS_PER_YEAR = Decimal(12)
MIN_ELIGIBLE_YEARS = Decimal(1)
FIRST_TIER_YEARS = Decimal(5)
FIRST_TIER_DAYS = Decimal(21)
SECOND_TIER_DAYS = Decimal(30)
CAP_YEARS = Decimal(2)


class InvalidInputError(ValueError):
    """Raised when calculator input cannot produce a meaningful result."""

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class GratuityInput(BaseModel):
    """Numeric inputs for one calculation.

    Ranges are not enforced here; :func:`compute` validates what it needs
    and tolerates ``months_worked`` above 11.
    """

    model_config = {"frozen": True}

    basic_salary: Decimal
    years_worked: Decimal
    months_worked: int = 0
    include_allowances: bool = False
    allowances: Decimal = Decimal(0)


class BreakdownLine(BaseModel):
    """One line of the calculation trace."""

    model_config = {"frozen": True}

    description: str
    calculation_text: str
    amount: Decimal
    is_cap_adjustment: bool = False


class GratuityResult(BaseModel):
    """Outcome of :func:`compute`.

    Attributes:
        total_gratuity: Amount payable, ``min(raw_gratuity, cap_amount)``.
        service_years: ``years_worked + months_worked / 12``.
        monthly_salary_basis: Basic salary plus included allowances.
        daily_salary: Monthly basis over a 30-day month.
        breakdown: Tier lines in order, then the cap adjustment if any.
        was_capped: Whether the cap reduced the raw amount.
        cap_amount: Two years' salary, ``monthly_salary_basis * 24``.
        raw_gratuity: Uncapped sum of the tier lines.
    """

    model_config = {"frozen": True}

    total_gratuity: Decimal
    service_years: Decimal
    monthly_salary_basis: Decimal
    daily_salary: Decimal
    breakdown: tuple[BreakdownLine, ...]
    was_capped: bool
    cap_amount: Decimal
    raw_gratuity: Decimal


def _validate(data: GratuityInput) -> None:
    if data.basic_salary <= 0:
        raise InvalidInputError(
            "basic_salary", data.basic_salary, "Please enter a valid basic salary amount."
        )
    if data.years_worked < 0:
        raise InvalidInputError(
            "years_worked", data.years_worked, "Please enter valid service period."
        )
    if data.months_worked < 0:
        raise InvalidInputError(
            "months_worked", data.months_worked, "Please enter valid service period."
        )


def _tier_text(years: Decimal, days: Decimal, daily_salary: Decimal, currency: str) -> str:
    """*years* is printed as given; callers round fractional durations."""
    return (
        f"{years} years × {days} days × "
        f"{format_money(daily_salary, currency)} (daily salary)"
    )


def compute(data: GratuityInput, *, currency: str = "AED") -> GratuityResult:
    """Compute the gratuity owed for *data*.

    *currency* only labels amounts inside ``calculation_text``.

    Raises:
        InvalidInputError: basic salary is not positive, or either
            service component is negative.
    """
    _validate(data)

    allowances = data.allowances if data.include_allowances else Decimal(0)
    monthly = data.basic_salary + allowances
    service_years = data.years_worked + Decimal(data.months_worked) / MONTHS_PER_YEAR
    daily = monthly / DAYS_PER_MONTH

    lines: list[BreakdownLine] = []
    if service_years < MIN_ELIGIBLE_YEARS:
        raw = Decimal(0)
        lines.append(
            BreakdownLine(
                description="Service period less than 1 year",
                calculation_text="No gratuity eligible",
                amount=raw,
            )
        )
    elif service_years <= FIRST_TIER_YEARS:
        raw = service_years * FIRST_TIER_DAYS * daily
        lines.append(
            BreakdownLine(
                description=f"Service period: {money(service_years)} years (≤5 years)",
                calculation_text=_tier_text(money(service_years), FIRST_TIER_DAYS, daily, currency),
                amount=raw,
            )
        )
    else:
        first = FIRST_TIER_YEARS * FIRST_TIER_DAYS * daily
        extra_years = service_years - FIRST_TIER_YEARS
        extra = extra_years * SECOND_TIER_DAYS * daily
        lines.append(
            BreakdownLine(
                description="First 5 years of service",
                calculation_text=_tier_text(FIRST_TIER_YEARS, FIRST_TIER_DAYS, daily, currency),
                amount=first,
            )
        )
        lines.append(
            BreakdownLine(
                description=f"Additional {money(extra_years)} years of service",
                calculation_text=_tier_text(money(extra_years), SECOND_TIER_DAYS, daily, currency),
                amount=extra,
            )
        )
        raw = first + extra

    cap = monthly * MONTHS_PER_YEAR * CAP_YEARS
    was_capped = raw > cap
    if was_capped:
        lines.append(
            BreakdownLine(
                description="Maximum limit applied",
                calculation_text=f"Limited to 2 years' salary ({format_money(cap, currency)})",
                amount=cap - raw,
                is_cap_adjustment=True,
            )
        )
        total = cap
    else:
        total = raw

    return GratuityResult(
        total_gratuity=total,
        service_years=service_years,
        monthly_salary_basis=monthly,
        daily_salary=daily,
        breakdown=tuple(lines),
        was_capped=was_capped,
        cap_amount=cap,
        raw_gratuity=raw,
    )
