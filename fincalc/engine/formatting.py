"""Presentation shaping: display strings and chart-ready series.

The only place in the engine that turns a Decimal into a display string.
No business logic.
"""

from decimal import Decimal

from fincalc.engine.money import DecimalDomainError, ZERO, money_context, to_decimal
from fincalc.models.results import GrowthResult, MortgageResult, MortgageSummary

PLACEHOLDER = "N/A"


def format_currency(value, cents: bool = True) -> str:
    """$1,438.92 / -$1,438.92. Non-finite input renders as N/A."""
    try:
        amount = to_decimal(value)
    except DecimalDomainError:
        return PLACEHOLDER
    places = 2 if cents else 0
    with money_context():
        text = f"{abs(amount):,.{places}f}"
    if amount < 0 and text.strip("0.,") != "":
        return f"-${text}"
    return f"${text}"


def format_number(value) -> str:
    """Plain figure with thousands separators and no padding: 10,000,000 / 3.5"""
    try:
        amount = to_decimal(value)
    except DecimalDomainError:
        return PLACEHOLDER
    with money_context():
        return f"{amount:,f}"


def format_percentage(value, decimals: int = 2) -> str:
    """Percentage points to text: Decimal("6") -> 6.00%"""
    try:
        amount = to_decimal(value)
    except DecimalDomainError:
        return PLACEHOLDER
    with money_context():
        text = f"{amount:.{decimals}f}"
    if text.startswith("-") and text.strip("-0.") == "":
        text = text[1:]
    return f"{text}%"


def _year_label(year: int) -> str:
    return f"Year {year}"


def growth_series(result: GrowthResult, field: str = "ending_balance") -> tuple[tuple[str, Decimal], ...]:
    """One (label, value) point per projected year for any GrowthPeriod field."""
    return tuple((_year_label(p.year), getattr(p, field)) for p in result.periods)


def growth_composition(result: GrowthResult) -> tuple[tuple[str, Decimal, Decimal, Decimal], ...]:
    """(label, contributed to date, interest to date, balance) per year, for stacked charts."""
    rows = []
    contributed = result.summary.total_contributed - sum((p.contributions for p in result.periods), ZERO)
    for p in result.periods:
        contributed += p.contributions
        rows.append((_year_label(p.year), contributed, p.ending_balance - contributed, p.ending_balance))
    return tuple(rows)


def mortgage_balance_series(result: MortgageResult) -> tuple[tuple[str, Decimal], ...]:
    """Remaining balance at each year end."""
    return tuple((_year_label(y.year), y.ending_balance) for y in result.yearly)


def mortgage_yearly_series(result: MortgageResult) -> tuple[tuple[str, Decimal, Decimal], ...]:
    """(label, principal, interest) per loan year."""
    return tuple((_year_label(y.year), y.principal, y.interest) for y in result.yearly)


def cost_breakdown(summary: MortgageSummary) -> tuple[tuple[str, Decimal], ...]:
    """Monthly outlay slices; zero-valued ancillaries are dropped."""
    costs = summary.monthly_costs
    slices = [
        ("Principal & Interest", costs.principal_and_interest),
        ("Property Tax", costs.property_tax),
        ("Home Insurance", costs.home_insurance),
        ("PMI", costs.pmi),
        ("HOA Fees", costs.hoa),
    ]
    return tuple((label, value) for label, value in slices if label == "Principal & Interest" or value > 0)
