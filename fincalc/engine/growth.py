"""Compound growth projection with recurring contributions.

Pure functions: Decimal in, dataclass out. No I/O.

Compounding frequency and contribution frequency are independent: the
contribution is converted to an annual amount and spread over the
compounding sub-periods of each year.

A 0% rate needs no special case here. The periodic rate is only ever a
multiplicand, so contributions simply accumulate linearly. Contrast with the
annuity formulas in mortgage.py and planning.py, which divide by the rate.
"""

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

from fincalc.engine.constants import RULE_OF_72, SAFE_WITHDRAWAL_RATE
from fincalc.engine.frequency import annual_amount, periodic_rate, periods_per_year
from fincalc.engine.money import (
    HUNDRED,
    ONE,
    ZERO,
    maximum,
    money_context,
    power,
    round_currency,
    round_rate,
)
from fincalc.models.parameters import GrowthParameters
from fincalc.models.results import GrowthPeriod, GrowthResult, GrowthSummary


def annual_contribution(params: GrowthParameters) -> Decimal:
    """Recurring contribution scaled to a full year, in cents."""
    with money_context():
        return round_currency(annual_amount(params.contribution, params.contribution_frequency))


def real_value(balance: Decimal, inflation_rate: Decimal, year: int) -> Decimal:
    """Simple deflation: balance * (1 - inflation)^year."""
    with money_context():
        factor = power(ONE - inflation_rate / HUNDRED, year)
        return round_currency(balance * factor)


def after_tax_value(balance: Decimal, total_contributed: Decimal, tax_rate: Decimal) -> Decimal:
    """Balance less tax on the unrealized gain. Losses are not taxed."""
    with money_context():
        gain = maximum(ZERO, balance - total_contributed)
        return round_currency(balance - gain * tax_rate / HUNDRED)


def effective_annual_rate(params: GrowthParameters) -> Decimal:
    """(1 + periodic)^n - 1, in percentage points."""
    with money_context():
        r = periodic_rate(params.annual_rate, params.compounding)
        n = periods_per_year(params.compounding)
        return round_rate((power(ONE + r, n) - ONE) * HUNDRED)


def years_to_double(annual_rate: Decimal) -> int | None:
    """Rule of 72 estimate; None when money never doubles."""
    if annual_rate <= 0:
        return None
    with money_context():
        return int((RULE_OF_72 / annual_rate).to_integral_value(ROUND_HALF_UP))


def sustainable_monthly_income(future_value: Decimal) -> Decimal:
    """Monthly draw under the fixed safe-withdrawal-rate assumption."""
    with money_context():
        return round_currency(future_value * SAFE_WITHDRAWAL_RATE / 12)


def growth_ledger(params: GrowthParameters) -> tuple[GrowthPeriod, ...]:
    """Year-by-year ledger.

    Each compounding sub-period: deposit the pro-rated contribution, then
    accrue interest on balance + deposit. Deposits and interest are rounded
    to cents as they post; the last sub-period of a year takes the deposit
    remainder so every year receives exactly the annual contribution.
    """
    with money_context():
        n = periods_per_year(params.compounding)
        r = periodic_rate(params.annual_rate, params.compounding)
        yearly_deposit = annual_contribution(params)
        deposit = round_currency(yearly_deposit / n, ROUND_DOWN)

        balance = round_currency(params.principal)
        contributed = balance
        periods: list[GrowthPeriod] = []

        for year in range(1, params.horizon_years + 1):
            starting = balance
            year_contributions = ZERO
            year_interest = ZERO

            for sub_period in range(1, n + 1):
                if sub_period == n:
                    amount = yearly_deposit - year_contributions
                else:
                    amount = deposit
                balance += amount
                year_contributions += amount

                interest = round_currency(balance * r)
                balance += interest
                year_interest += interest

            contributed += year_contributions

            periods.append(GrowthPeriod(
                year=year,
                starting_balance=starting,
                contributions=year_contributions,
                interest=year_interest,
                ending_balance=balance,
                real_value=real_value(balance, params.inflation_rate, year),
                after_tax_value=after_tax_value(balance, contributed, params.tax_rate),
            ))

    return tuple(periods)


def summarize_growth(params: GrowthParameters, periods: tuple[GrowthPeriod, ...]) -> GrowthSummary:
    with money_context():
        principal = round_currency(params.principal)
        total_contributions = principal + sum((p.contributions for p in periods), ZERO)
        total_interest = sum((p.interest for p in periods), ZERO)

    if periods:
        last = periods[-1]
        future_value, real_fv, after_tax_fv = last.ending_balance, last.real_value, last.after_tax_value
    else:
        future_value = real_fv = after_tax_fv = principal

    return GrowthSummary(
        total_contributed=total_contributions,
        total_interest=total_interest,
        future_value=future_value,
        effective_annual_rate=effective_annual_rate(params),
        real_future_value=real_fv,
        after_tax_future_value=after_tax_fv,
        sustainable_monthly_income=sustainable_monthly_income(future_value),
        years_to_double=years_to_double(params.annual_rate),
    )


def project_growth(params: GrowthParameters) -> GrowthResult:
    """Full projection: ledger + summary. Assumes validated parameters."""
    periods = growth_ledger(params)
    summary = summarize_growth(params, periods)
    return GrowthResult(periods=periods, summary=summary)
