"""Frequency resolver: enum -> periods per year, label, per-period rate/amount.

Pure functions. No I/O.
"""

from decimal import Decimal

from fincalc.engine.constants import FREQUENCY_TABLE, FrequencyInfo
from fincalc.engine.money import HUNDRED, divide, money_context
from fincalc.models.parameters import CompoundingFrequency, PaymentFrequency

Frequency = CompoundingFrequency | PaymentFrequency


def _check_table() -> None:
    for enum_cls in (CompoundingFrequency, PaymentFrequency):
        for member in enum_cls:
            info = FREQUENCY_TABLE.get(member.value)
            if info is None:
                raise RuntimeError(f"No frequency metadata for {member!r}")
            if info.periods_per_year < 1:
                raise RuntimeError(f"{member!r} resolves to {info.periods_per_year} periods per year")


_check_table()


def resolve(frequency: Frequency) -> FrequencyInfo:
    return FREQUENCY_TABLE[frequency.value]


def periods_per_year(frequency: Frequency) -> int:
    return resolve(frequency).periods_per_year


def frequency_label(frequency: Frequency) -> str:
    return resolve(frequency).label


def periodic_rate(annual_rate: Decimal, frequency: Frequency) -> Decimal:
    """Per-period rate as a fraction, from an annual nominal rate in percentage points.

    6% annual, monthly -> 0.005
    """
    with money_context():
        return divide(annual_rate, HUNDRED * periods_per_year(frequency))


def periodic_amount(annual_amount: Decimal, frequency: Frequency) -> Decimal:
    """Spread an annual amount evenly over the periods of a year (unrounded)."""
    return divide(annual_amount, Decimal(periods_per_year(frequency)))


def annual_amount(periodic: Decimal, frequency: Frequency) -> Decimal:
    """Inverse of periodic_amount: one period's amount scaled to a full year."""
    with money_context():
        return periodic * periods_per_year(frequency)
