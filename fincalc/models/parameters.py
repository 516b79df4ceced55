from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from fincalc.engine.money import money_context


class CompoundingFrequency(Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class PaymentFrequency(Enum):
    """How often money is added to (growth) or paid against (mortgage) a balance."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class GrowthGoal(Enum):
    RETIREMENT = "retirement"
    HOME_PURCHASE = "home_purchase"
    EDUCATION = "education"
    EMERGENCY_FUND = "emergency_fund"
    WEALTH_BUILDING = "wealth_building"


# Default horizon when the caller leaves `years` unset
GOAL_DEFAULT_YEARS: dict[GrowthGoal, int] = {
    GrowthGoal.RETIREMENT: 30,
    GrowthGoal.HOME_PURCHASE: 5,
    GrowthGoal.EDUCATION: 18,
    GrowthGoal.EMERGENCY_FUND: 3,
    GrowthGoal.WEALTH_BUILDING: 20,
}


@dataclass(frozen=True)
class GrowthParameters:
    principal: Decimal = Decimal("0")  # Initial deposit
    contribution: Decimal = Decimal("0")  # Per contribution period
    annual_rate: Decimal = Decimal("7")  # Nominal, percentage points
    years: int | None = None  # None = goal default
    compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY
    contribution_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    inflation_rate: Decimal = Decimal("0")  # Percentage points
    tax_rate: Decimal = Decimal("0")  # Applied to unrealized gain
    goal: GrowthGoal = GrowthGoal.RETIREMENT

    @property
    def horizon_years(self):
        if self.years is not None:
            return self.years
        return GOAL_DEFAULT_YEARS.get(self.goal)


@dataclass(frozen=True)
class MortgageParameters:
    home_price: Decimal
    down_payment: Decimal
    annual_rate: Decimal  # Nominal, percentage points
    term_years: int = 30
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    # Ancillary costs (do not amortize)
    property_tax: Decimal = Decimal("0")  # Annual
    home_insurance: Decimal = Decimal("0")  # Annual
    pmi: Decimal = Decimal("0")  # Monthly
    hoa: Decimal = Decimal("0")  # Monthly

    @property
    def loan_amount(self) -> Decimal:
        with money_context():
            return self.home_price - self.down_payment

    @property
    def down_payment_pct(self) -> Decimal:
        """Down payment as percentage points of the price."""
        if self.home_price == 0:
            return Decimal("0")
        with money_context():
            return self.down_payment / self.home_price * 100

    @property
    def loan_to_value(self) -> Decimal:
        if self.home_price == 0:
            return Decimal("0")
        with money_context():
            return self.loan_amount / self.home_price * 100
