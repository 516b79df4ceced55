"""Static configuration table: input bounds, frequency metadata, rule constants.

Data only. Raising a ceiling (e.g. max term) is an edit here, not in the
validator or the pipelines.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FieldBounds:
    min: Decimal
    max: Decimal
    integer: bool = False


@dataclass(frozen=True)
class FrequencyInfo:
    periods_per_year: int
    label: str


GROWTH_BOUNDS: dict[str, FieldBounds] = {
    "principal": FieldBounds(Decimal("0"), Decimal("10000000")),
    "contribution": FieldBounds(Decimal("0"), Decimal("100000")),
    "annual_rate": FieldBounds(Decimal("0"), Decimal("50")),
    "years": FieldBounds(Decimal("1"), Decimal("50"), integer=True),
    "inflation_rate": FieldBounds(Decimal("0"), Decimal("20")),
    "tax_rate": FieldBounds(Decimal("0"), Decimal("50")),
}

MORTGAGE_BOUNDS: dict[str, FieldBounds] = {
    "home_price": FieldBounds(Decimal("50000"), Decimal("50000000")),
    "down_payment": FieldBounds(Decimal("0"), Decimal("10000000")),
    "annual_rate": FieldBounds(Decimal("0"), Decimal("20")),
    "term_years": FieldBounds(Decimal("1"), Decimal("50"), integer=True),
    "property_tax": FieldBounds(Decimal("0"), Decimal("500000")),
    "home_insurance": FieldBounds(Decimal("0"), Decimal("100000")),
    "pmi": FieldBounds(Decimal("0"), Decimal("10000")),
    "hoa": FieldBounds(Decimal("0"), Decimal("10000")),
}

# Keyed by enum value so CompoundingFrequency and PaymentFrequency share rows
FREQUENCY_TABLE: dict[str, FrequencyInfo] = {
    "daily": FrequencyInfo(365, "Daily"),
    "monthly": FrequencyInfo(12, "Monthly"),
    "quarterly": FrequencyInfo(4, "Quarterly"),
    "annually": FrequencyInfo(1, "Annually"),
}

SAFE_WITHDRAWAL_RATE = Decimal("0.04")  # 4% rule
MIN_DOWN_PAYMENT_PCT = Decimal("3.5")  # FHA minimum, percentage points
PMI_LTV_THRESHOLD = Decimal("80")  # PMI applies above 80% loan-to-value
RULE_OF_72 = Decimal("72")

# Insight thresholds, percentage points unless noted
HIGH_LTV_PCT = Decimal("80")  # at or above: suggest a larger down payment
HIGH_MORTGAGE_RATE = Decimal("7")
LOW_MORTGAGE_RATE = Decimal("4")
LONG_TERM_YEARS = 30
LONG_HORIZON_YEARS = 20
STRONG_RETURN_RATE = Decimal("7")
CONTRIBUTION_SHARE_PCT = Decimal("50")  # recurring deposits vs everything put in
