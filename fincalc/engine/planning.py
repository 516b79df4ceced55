"""Goal planning: present value and required contributions to hit a target.

Pure functions. No I/O. Rates are in percentage points.

Unlike the growth ledger, the annuity formula here divides by the periodic
rate, so a 0% rate takes the linear branch.
"""

from decimal import Decimal

from fincalc.engine.frequency import periodic_rate, periods_per_year
from fincalc.engine.money import ONE, ZERO, divide, money_context, power, round_currency
from fincalc.models.parameters import CompoundingFrequency, PaymentFrequency


def future_value_of_lump_sum(
    principal: Decimal,
    annual_rate: Decimal,
    years: int,
    compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
) -> Decimal:
    """P * (1 + r/n)^(n*t)"""
    with money_context():
        r = periodic_rate(annual_rate, compounding)
        n = periods_per_year(compounding)
        return round_currency(principal * power(ONE + r, n * years))


def present_value(
    future_value: Decimal,
    annual_rate: Decimal,
    years: int,
    compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
) -> Decimal:
    """Amount needed today to grow into future_value with no further deposits."""
    with money_context():
        r = periodic_rate(annual_rate, compounding)
        n = periods_per_year(compounding)
        return round_currency(divide(future_value, power(ONE + r, n * years)))


def required_periodic_contribution(
    goal_amount: Decimal,
    annual_rate: Decimal,
    years: int,
    current_savings: Decimal = ZERO,
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
) -> Decimal:
    """End-of-period deposit needed to reach goal_amount in `years`.

    Current savings compound at the same rate and frequency. Returns 0 when
    they already cover the goal.
    """
    with money_context():
        r = periodic_rate(annual_rate, frequency)
        n = periods_per_year(frequency) * years
        growth = power(ONE + r, n)

        remaining = goal_amount - current_savings * growth
        if remaining <= 0:
            return Decimal("0.00")

        if r == 0:
            return round_currency(divide(remaining, Decimal(n)))
        # PMT = FV * r / ((1+r)^n - 1)
        return round_currency(divide(remaining * r, growth - ONE))
