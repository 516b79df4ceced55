"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

# Numbers stay raw so the engine validator can report bad values field by field
Amount = Decimal | str
WholeNumber = int | Decimal | str


class GrowthRequest(BaseModel):
    principal: Amount = Field(Decimal("0"), description="Initial deposit")
    contribution: Amount = Field(Decimal("0"), description="Amount added each contribution period")
    annual_rate: Amount = Field(..., description="Nominal annual rate, percentage points (7 = 7%)")
    years: WholeNumber | None = Field(None, description="Horizon; defaults from goal when omitted")
    compounding: str = "monthly"
    contribution_frequency: str = "monthly"
    inflation_rate: Amount = Decimal("0")
    tax_rate: Amount = Decimal("0")
    goal: str = "retirement"


class RequiredContributionRequest(BaseModel):
    goal_amount: Amount
    annual_rate: Amount
    years: WholeNumber
    current_savings: Amount = Decimal("0")
    frequency: str = "monthly"


class MortgageRequest(BaseModel):
    home_price: Amount
    down_payment: Amount
    annual_rate: Amount = Field(..., description="Nominal annual rate, percentage points")
    term_years: WholeNumber = 30
    payment_frequency: str = "monthly"
    property_tax: Amount = Field(Decimal("0"), description="Annual")
    home_insurance: Amount = Field(Decimal("0"), description="Annual")
    pmi: Amount = Field(Decimal("0"), description="Monthly")
    hoa: Amount = Field(Decimal("0"), description="Monthly")
    include_schedule: bool = True


# ---- Response schemas ----

class ValidationErrorResponse(BaseModel):
    field: str
    message: str


class ChartPoint(BaseModel):
    label: str
    value: Decimal


class InsightResponse(BaseModel):
    kind: str
    title: str
    message: str


class GrowthPeriodResponse(BaseModel):
    year: int
    starting_balance: Decimal
    contributions: Decimal
    interest: Decimal
    ending_balance: Decimal
    real_value: Decimal
    after_tax_value: Decimal


class GrowthSummaryResponse(BaseModel):
    total_contributed: Decimal
    total_interest: Decimal
    future_value: Decimal
    effective_annual_rate: Decimal
    real_future_value: Decimal
    after_tax_future_value: Decimal
    sustainable_monthly_income: Decimal
    years_to_double: int | None = None


class GrowthResponse(BaseModel):
    summary: GrowthSummaryResponse
    periods: list[GrowthPeriodResponse]
    chart: list[ChartPoint] = []
    display: dict[str, str] = {}
    insights: list[InsightResponse] = []


class RequiredContributionResponse(BaseModel):
    required_contribution: Decimal
    present_value: Decimal
    display: str


class MortgagePeriodResponse(BaseModel):
    payment_index: int
    year: int
    month_in_year: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal


class MortgageYearResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal


class MortgageSummaryResponse(BaseModel):
    loan_amount: Decimal
    periodic_payment: Decimal
    total_monthly_payment: Decimal
    monthly_property_tax: Decimal
    monthly_insurance: Decimal
    monthly_pmi: Decimal
    monthly_hoa: Decimal
    total_principal: Decimal
    total_interest: Decimal
    total_paid: Decimal
    total_ancillary_cost: Decimal
    total_cost: Decimal
    payment_count: int
    pmi_months: int
    effective_annual_rate: Decimal
    loan_to_value: Decimal
    down_payment_pct: Decimal


class MortgageResponse(BaseModel):
    summary: MortgageSummaryResponse
    yearly: list[MortgageYearResponse]
    schedule: list[MortgagePeriodResponse] = []
    cost_breakdown: list[ChartPoint] = []
    display: dict[str, str] = {}
    insights: list[InsightResponse] = []
