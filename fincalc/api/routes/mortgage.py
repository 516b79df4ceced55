"""Mortgage amortization routes."""

from fastapi import APIRouter

from fincalc.api.parsing import insight_responses, parse_enum, unprocessable
from fincalc.api.schemas import (
    ChartPoint,
    MortgagePeriodResponse,
    MortgageRequest,
    MortgageResponse,
    MortgageSummaryResponse,
    MortgageYearResponse,
)
from fincalc.engine.calculator import run_mortgage
from fincalc.engine.formatting import cost_breakdown, format_currency, format_percentage
from fincalc.models.parameters import MortgageParameters, PaymentFrequency
from fincalc.models.results import MortgageResult

router = APIRouter(prefix="/api/v1/mortgage", tags=["mortgage"])


def _build_params(req: MortgageRequest) -> MortgageParameters:
    return MortgageParameters(
        home_price=req.home_price,
        down_payment=req.down_payment,
        annual_rate=req.annual_rate,
        term_years=req.term_years,
        payment_frequency=parse_enum(PaymentFrequency, req.payment_frequency),
        property_tax=req.property_tax,
        home_insurance=req.home_insurance,
        pmi=req.pmi,
        hoa=req.hoa,
    )


def _result_to_response(result: MortgageResult, include_schedule: bool) -> MortgageResponse:
    s = result.summary
    costs = s.monthly_costs

    schedule = []
    if include_schedule:
        schedule = [
            MortgagePeriodResponse(
                payment_index=p.payment_index,
                year=p.year,
                month_in_year=p.month_in_year,
                payment=p.payment,
                principal_portion=p.principal_portion,
                interest_portion=p.interest_portion,
                remaining_balance=p.remaining_balance,
                cumulative_interest=p.cumulative_interest,
                cumulative_principal=p.cumulative_principal,
            )
            for p in result.periods
        ]

    return MortgageResponse(
        summary=MortgageSummaryResponse(
            loan_amount=s.loan_amount,
            periodic_payment=s.periodic_payment,
            total_monthly_payment=s.total_monthly_payment,
            monthly_property_tax=costs.property_tax,
            monthly_insurance=costs.home_insurance,
            monthly_pmi=costs.pmi,
            monthly_hoa=costs.hoa,
            total_principal=s.total_principal,
            total_interest=s.total_interest,
            total_paid=s.total_paid,
            total_ancillary_cost=s.total_ancillary_cost,
            total_cost=s.total_cost,
            payment_count=s.payment_count,
            pmi_months=s.pmi_months,
            effective_annual_rate=s.effective_annual_rate,
            loan_to_value=s.loan_to_value,
            down_payment_pct=s.down_payment_pct,
        ),
        yearly=[
            MortgageYearResponse(
                year=y.year,
                principal=y.principal,
                interest=y.interest,
                payments=y.payments,
                ending_balance=y.ending_balance,
            )
            for y in result.yearly
        ],
        schedule=schedule,
        cost_breakdown=[ChartPoint(label=label, value=value) for label, value in cost_breakdown(s)],
        insights=insight_responses(result.insights),
        display={
            "periodic_payment": format_currency(s.periodic_payment),
            "total_monthly_payment": format_currency(s.total_monthly_payment),
            "total_interest": format_currency(s.total_interest),
            "total_cost": format_currency(s.total_cost),
            "loan_to_value": format_percentage(s.loan_to_value, decimals=1),
            "effective_annual_rate": format_percentage(s.effective_annual_rate),
        },
    )


@router.post("", response_model=MortgageResponse)
def amortize_loan(req: MortgageRequest):
    """Fixed payment, full amortization schedule, yearly roll-up and totals."""
    outcome = run_mortgage(_build_params(req))
    if not outcome.ok:
        raise unprocessable(outcome.errors)
    return _result_to_response(outcome.result, req.include_schedule)
