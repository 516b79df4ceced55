"""Rule-based observations on a finished growth projection or mortgage.

Pure functions of the (normalized) parameters and the summary. Every figure
in a message goes through the formatting helpers.
"""

from fincalc.engine.constants import (
    CONTRIBUTION_SHARE_PCT,
    HIGH_LTV_PCT,
    HIGH_MORTGAGE_RATE,
    LONG_HORIZON_YEARS,
    LONG_TERM_YEARS,
    LOW_MORTGAGE_RATE,
    STRONG_RETURN_RATE,
)
from fincalc.engine.formatting import format_currency, format_percentage
from fincalc.engine.frequency import frequency_label
from fincalc.engine.growth import annual_contribution
from fincalc.engine.money import HUNDRED, divide, money_context
from fincalc.models.parameters import GrowthParameters, MortgageParameters
from fincalc.models.results import GrowthSummary, Insight, InsightKind, MortgageSummary


def growth_insights(params: GrowthParameters, summary: GrowthSummary) -> tuple[Insight, ...]:
    insights: list[Insight] = []
    years = params.horizon_years

    if summary.total_contributed > 0 and summary.total_interest > summary.total_contributed:
        insights.append(Insight(
            InsightKind.SUCCESS,
            "Compound Interest Power",
            f"Interest earned ({format_currency(summary.total_interest)}) exceeds your total "
            f"contributions of {format_currency(summary.total_contributed)}.",
        ))

    if years >= LONG_HORIZON_YEARS and params.annual_rate >= STRONG_RETURN_RATE:
        insights.append(Insight(
            InsightKind.SUCCESS,
            "Long-Term Wealth Building",
            f"A {years}-year horizon gives compound interest the most time to work.",
        ))

    if summary.effective_annual_rate > params.annual_rate:
        insights.append(Insight(
            InsightKind.INFO,
            "Effective vs Nominal Rate",
            f"Compounding {frequency_label(params.compounding).lower()} turns a "
            f"{format_percentage(params.annual_rate)} nominal rate into "
            f"{format_percentage(summary.effective_annual_rate)} a year.",
        ))

    with money_context():
        recurring = annual_contribution(params) * years
        if recurring > 0 and summary.total_contributed > 0:
            share = divide(recurring, summary.total_contributed) * HUNDRED
        else:
            share = None
    if share is not None and share > CONTRIBUTION_SHARE_PCT:
        insights.append(Insight(
            InsightKind.INFO,
            "Contribution Impact",
            f"Recurring contributions make up {format_percentage(share, decimals=1)} "
            f"of the money you put in.",
        ))

    return tuple(insights)


def mortgage_insights(params: MortgageParameters, summary: MortgageSummary) -> tuple[Insight, ...]:
    insights: list[Insight] = []
    ltv = format_percentage(summary.loan_to_value, decimals=1)

    if summary.loan_to_value >= HIGH_LTV_PCT:
        insights.append(Insight(
            InsightKind.WARNING,
            "High Loan-to-Value Ratio",
            f"Your LTV is {ltv}. A larger down payment avoids PMI and lowers monthly costs.",
        ))
    else:
        insights.append(Insight(
            InsightKind.SUCCESS,
            "Good Loan-to-Value Ratio",
            f"Your LTV of {ltv} keeps you clear of PMI and usually earns better rates.",
        ))

    if summary.total_interest > summary.loan_amount:
        insights.append(Insight(
            InsightKind.INFO,
            "Interest Exceeds Principal",
            f"You'll pay {format_currency(summary.total_interest)} in interest over the loan term. "
            f"Extra principal payments reduce this cost.",
        ))

    if params.term_years >= LONG_TERM_YEARS:
        insights.append(Insight(
            InsightKind.INFO,
            "Long-Term Loan",
            f"A {params.term_years}-year term keeps payments low but costs more total interest. "
            f"A 15-year loan saves interest if you can afford higher payments.",
        ))

    rate = format_percentage(params.annual_rate)
    if params.annual_rate > HIGH_MORTGAGE_RATE:
        insights.append(Insight(
            InsightKind.WARNING,
            "High Interest Rate",
            f"Your {rate} rate is above average. Shopping lenders or improving your credit "
            f"score can lower it.",
        ))
    elif params.annual_rate < LOW_MORTGAGE_RATE:
        insights.append(Insight(
            InsightKind.SUCCESS,
            "Excellent Interest Rate",
            f"Your {rate} rate will save significant money over the loan term.",
        ))

    return tuple(insights)
