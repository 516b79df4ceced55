"""Compound growth routes."""

from fastapi import APIRouter

from fincalc.api.parsing import insight_responses, parse_enum, unprocessable
from fincalc.api.schemas import (
    ChartPoint,
    GrowthPeriodResponse,
    GrowthRequest,
    GrowthResponse,
    GrowthSummaryResponse,
    RequiredContributionRequest,
    RequiredContributionResponse,
)
from fincalc.engine.calculator import run_growth
from fincalc.engine.formatting import format_currency, format_percentage, growth_series
from fincalc.engine.money import to_decimal
from fincalc.engine.planning import present_value, required_periodic_contribution
from fincalc.engine.validation import validate_goal_plan
from fincalc.models.parameters import (
    CompoundingFrequency,
    GrowthGoal,
    GrowthParameters,
    PaymentFrequency,
)
from fincalc.models.results import GrowthResult

router = APIRouter(prefix="/api/v1/growth", tags=["growth"])


def _build_params(req: GrowthRequest) -> GrowthParameters:
    return GrowthParameters(
        principal=req.principal,
        contribution=req.contribution,
        annual_rate=req.annual_rate,
        years=req.years,
        compounding=parse_enum(CompoundingFrequency, req.compounding),
        contribution_frequency=parse_enum(PaymentFrequency, req.contribution_frequency),
        inflation_rate=req.inflation_rate,
        tax_rate=req.tax_rate,
        goal=parse_enum(GrowthGoal, req.goal),
    )


def _result_to_response(result: GrowthResult) -> GrowthResponse:
    s = result.summary
    return GrowthResponse(
        summary=GrowthSummaryResponse(
            total_contributed=s.total_contributed,
            total_interest=s.total_interest,
            future_value=s.future_value,
            effective_annual_rate=s.effective_annual_rate,
            real_future_value=s.real_future_value,
            after_tax_future_value=s.after_tax_future_value,
            sustainable_monthly_income=s.sustainable_monthly_income,
            years_to_double=s.years_to_double,
        ),
        periods=[
            GrowthPeriodResponse(
                year=p.year,
                starting_balance=p.starting_balance,
                contributions=p.contributions,
                interest=p.interest,
                ending_balance=p.ending_balance,
                real_value=p.real_value,
                after_tax_value=p.after_tax_value,
            )
            for p in result.periods
        ],
        chart=[ChartPoint(label=label, value=value) for label, value in growth_series(result)],
        insights=insight_responses(result.insights),
        display={
            "future_value": format_currency(s.future_value),
            "total_contributed": format_currency(s.total_contributed),
            "total_interest": format_currency(s.total_interest),
            "real_future_value": format_currency(s.real_future_value),
            "after_tax_future_value": format_currency(s.after_tax_future_value),
            "sustainable_monthly_income": format_currency(s.sustainable_monthly_income),
            "effective_annual_rate": format_percentage(s.effective_annual_rate),
        },
    )


@router.post("", response_model=GrowthResponse)
def project(req: GrowthRequest):
    """Year-by-year compound growth ledger and summary."""
    outcome = run_growth(_build_params(req))
    if not outcome.ok:
        raise unprocessable(outcome.errors)
    return _result_to_response(outcome.result)


@router.post("/required-contribution", response_model=RequiredContributionResponse)
def required_contribution(req: RequiredContributionRequest):
    """Periodic deposit needed to reach a savings goal."""
    frequency = parse_enum(PaymentFrequency, req.frequency)
    errors = validate_goal_plan(
        req.goal_amount, req.annual_rate, req.years, req.current_savings, frequency,
    )
    if errors:
        raise unprocessable(errors)

    goal = to_decimal(req.goal_amount)
    rate = to_decimal(req.annual_rate)
    years = int(to_decimal(req.years))
    amount = required_periodic_contribution(
        goal, rate, years, to_decimal(req.current_savings), frequency,
    )
    return RequiredContributionResponse(
        required_contribution=amount,
        present_value=present_value(goal, rate, years, CompoundingFrequency(frequency.value)),
        display=f"{format_currency(amount)} {frequency.value}",
    )
