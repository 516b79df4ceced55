"""Mortgage amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal

from fincalc.engine.constants import PMI_LTV_THRESHOLD
from fincalc.engine.frequency import periodic_rate, periods_per_year
from fincalc.engine.money import (
    HUNDRED,
    ONE,
    ZERO,
    divide,
    minimum,
    money_context,
    power,
    round_currency,
    round_rate,
)
from fincalc.models.parameters import MortgageParameters, PaymentFrequency
from fincalc.models.results import (
    MonthlyCosts,
    MortgagePeriod,
    MortgageResult,
    MortgageSummary,
    MortgageYear,
)


def periodic_payment(
    loan_amount: Decimal,
    annual_rate: Decimal,
    term_years: int,
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
) -> Decimal:
    """Fixed principal-and-interest payment per period.

    annual_rate is in percentage points (6 for 6%).
    """
    if loan_amount <= 0:
        return Decimal("0")
    n = term_years * periods_per_year(frequency)
    with money_context():
        if annual_rate == 0:
            # Annuity formula divides by (1+r)^n - 1 == 0
            return round_currency(divide(loan_amount, Decimal(n)))

        r = periodic_rate(annual_rate, frequency)
        # M = P * [r(1+r)^n] / [(1+r)^n - 1]
        factor = power(ONE + r, n)
        payment = divide(loan_amount * r * factor, factor - ONE)
        return round_currency(payment)


def monthly_payment(loan_amount: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Calculate fixed monthly mortgage payment."""
    return periodic_payment(loan_amount, annual_rate, term_years, PaymentFrequency.MONTHLY)


def amortization_schedule(params: MortgageParameters) -> tuple[MortgagePeriod, ...]:
    """Payment-by-payment ledger.

    Interest posts in cents each period. The final payment retires whatever
    balance is left, so the last remaining_balance is exactly zero and the
    principal portions sum to the loan amount.
    """
    ppy = periods_per_year(params.payment_frequency)
    months_per_period = 12 // ppy
    n_periods = params.term_years * ppy
    pmt = periodic_payment(params.loan_amount, params.annual_rate, params.term_years, params.payment_frequency)

    periods: list[MortgagePeriod] = []
    with money_context():
        r = periodic_rate(params.annual_rate, params.payment_frequency)
        balance = round_currency(params.loan_amount)
        cumulative_interest = ZERO
        cumulative_principal = ZERO

        for index in range(1, n_periods + 1):
            if balance <= 0:
                break
            interest = round_currency(balance * r)

            if index == n_periods:
                principal_paid = balance
            else:
                principal_paid = minimum(pmt - interest, balance)

            balance -= principal_paid
            cumulative_interest += interest
            cumulative_principal += principal_paid

            periods.append(MortgagePeriod(
                payment_index=index,
                year=(index - 1) // ppy + 1,
                month_in_year=((index - 1) % ppy + 1) * months_per_period,
                payment=interest + principal_paid,
                principal_portion=principal_paid,
                interest_portion=interest,
                remaining_balance=balance,
                cumulative_interest=cumulative_interest,
                cumulative_principal=cumulative_principal,
            ))

    return tuple(periods)


def yearly_rollup(periods: tuple[MortgagePeriod, ...]) -> tuple[MortgageYear, ...]:
    """Aggregate the ledger into one row per loan year."""
    yearly: list[MortgageYear] = []
    year_principal = ZERO
    year_interest = ZERO
    year_payments = ZERO

    with money_context():
        for i, p in enumerate(periods):
            year_principal += p.principal_portion
            year_interest += p.interest_portion
            year_payments += p.payment

            is_last = i == len(periods) - 1
            if is_last or periods[i + 1].year != p.year:
                yearly.append(MortgageYear(
                    year=p.year,
                    principal=year_principal,
                    interest=year_interest,
                    payments=year_payments,
                    ending_balance=p.remaining_balance,
                ))
                year_principal = ZERO
                year_interest = ZERO
                year_payments = ZERO

    return tuple(yearly)


def requires_pmi(params: MortgageParameters) -> bool:
    """Mortgage insurance applies when the loan starts above 80% LTV."""
    with money_context():
        return params.pmi > 0 and params.loan_to_value > PMI_LTV_THRESHOLD


def pmi_months(params: MortgageParameters, periods: tuple[MortgagePeriod, ...]) -> int:
    """Months of PMI: charged until the balance falls to 80% of the price."""
    if not requires_pmi(params):
        return 0
    months_per_period = 12 // periods_per_year(params.payment_frequency)
    with money_context():
        cutoff = params.home_price * PMI_LTV_THRESHOLD / HUNDRED
        opening_balance = round_currency(params.loan_amount)
    months = 0
    for p in periods:
        if opening_balance <= cutoff:
            break
        months += months_per_period
        opening_balance = p.remaining_balance
    return months


def monthly_costs(params: MortgageParameters, pmt: Decimal) -> MonthlyCosts:
    """Total monthly outlay at the start of the loan. Ancillaries never amortize."""
    ppy = periods_per_year(params.payment_frequency)
    with money_context():
        return MonthlyCosts(
            principal_and_interest=round_currency(pmt * ppy / 12),
            property_tax=round_currency(params.property_tax / 12),
            home_insurance=round_currency(params.home_insurance / 12),
            pmi=round_currency(params.pmi) if requires_pmi(params) else Decimal("0.00"),
            hoa=round_currency(params.hoa),
        )


def effective_annual_rate(annual_rate: Decimal, frequency: PaymentFrequency) -> Decimal:
    with money_context():
        r = periodic_rate(annual_rate, frequency)
        return round_rate((power(ONE + r, periods_per_year(frequency)) - ONE) * HUNDRED)


def summarize_mortgage(
    params: MortgageParameters,
    periods: tuple[MortgagePeriod, ...],
) -> MortgageSummary:
    pmt = periodic_payment(params.loan_amount, params.annual_rate, params.term_years, params.payment_frequency)
    costs = monthly_costs(params, pmt)
    months = len(periods) * (12 // periods_per_year(params.payment_frequency))
    insured_months = pmi_months(params, periods)

    with money_context():
        total_principal = sum((p.principal_portion for p in periods), ZERO)
        total_interest = sum((p.interest_portion for p in periods), ZERO)
        total_paid = total_principal + total_interest

        fixed_monthly = costs.property_tax + costs.home_insurance + costs.hoa
        total_ancillary = fixed_monthly * months + costs.pmi * insured_months

        return MortgageSummary(
            loan_amount=round_currency(params.loan_amount),
            periodic_payment=pmt,
            monthly_costs=costs,
            total_principal=total_principal,
            total_interest=total_interest,
            total_paid=total_paid,
            total_ancillary_cost=total_ancillary,
            total_cost=round_currency(params.down_payment) + total_paid + total_ancillary,
            payment_count=len(periods),
            pmi_months=insured_months,
            effective_annual_rate=effective_annual_rate(params.annual_rate, params.payment_frequency),
            loan_to_value=round_rate(params.loan_to_value),
            down_payment_pct=round_rate(params.down_payment_pct),
        )


def amortize(params: MortgageParameters) -> MortgageResult:
    """Full mortgage analysis: schedule, yearly roll-up, summary. Assumes validated parameters."""
    periods = amortization_schedule(params)
    yearly = yearly_rollup(periods)
    summary = summarize_mortgage(params, periods)
    return MortgageResult(periods=periods, yearly=yearly, summary=summary)
