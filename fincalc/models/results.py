from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


class InsightKind(Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Insight:
    """One rule-based observation about a finished calculation."""
    kind: InsightKind
    title: str
    message: str


@dataclass(frozen=True)
class GrowthPeriod:
    year: int
    starting_balance: Decimal
    contributions: Decimal
    interest: Decimal
    ending_balance: Decimal
    real_value: Decimal  # Deflated by (1 - inflation)^year
    after_tax_value: Decimal  # Less tax on unrealized gain


@dataclass(frozen=True)
class GrowthSummary:
    total_contributed: Decimal  # Principal + all contributions
    total_interest: Decimal
    future_value: Decimal
    effective_annual_rate: Decimal  # Percentage points
    real_future_value: Decimal
    after_tax_future_value: Decimal
    sustainable_monthly_income: Decimal
    years_to_double: int | None = None  # Rule of 72; None at 0%


@dataclass(frozen=True)
class GrowthResult:
    periods: tuple[GrowthPeriod, ...]
    summary: GrowthSummary
    insights: tuple[Insight, ...] = ()


@dataclass(frozen=True)
class MortgagePeriod:
    payment_index: int
    year: int
    month_in_year: int
    payment: Decimal  # Principal + interest actually paid this period
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal


@dataclass(frozen=True)
class MortgageYear:
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class MonthlyCosts:
    principal_and_interest: Decimal  # Monthly equivalent of the periodic payment
    property_tax: Decimal
    home_insurance: Decimal
    pmi: Decimal
    hoa: Decimal

    @property
    def total(self) -> Decimal:
        return (
            self.principal_and_interest
            + self.property_tax
            + self.home_insurance
            + self.pmi
            + self.hoa
        )


@dataclass(frozen=True)
class MortgageSummary:
    loan_amount: Decimal
    periodic_payment: Decimal  # P&I per payment period
    monthly_costs: MonthlyCosts
    total_principal: Decimal
    total_interest: Decimal
    total_paid: Decimal  # P&I over the life of the loan
    total_ancillary_cost: Decimal  # Tax, insurance, PMI, HOA over the term
    total_cost: Decimal  # Down payment + total paid + ancillary
    payment_count: int
    pmi_months: int
    effective_annual_rate: Decimal
    loan_to_value: Decimal
    down_payment_pct: Decimal

    @property
    def total_monthly_payment(self) -> Decimal:
        return self.monthly_costs.total


@dataclass(frozen=True)
class MortgageResult:
    periods: tuple[MortgagePeriod, ...]
    yearly: tuple[MortgageYear, ...]
    summary: MortgageSummary
    insights: tuple[Insight, ...] = ()


@dataclass(frozen=True)
class CalculationOutcome:
    """Either a result or a non-empty list of errors, never both."""
    result: GrowthResult | MortgageResult | None = None
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors
