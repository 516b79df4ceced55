"""CLI for the growth and mortgage calculators.

Usage:
    python -m fincalc.cli growth --contribution 500 --rate 7 --years 30
    python -m fincalc.cli growth --principal 10000 --rate 5 --goal education --inflation 3
    python -m fincalc.cli mortgage --price 300000 --down 60000 --rate 6 --term 30
    python -m fincalc.cli mortgage --price 400000 --down 20000 --rate 6.5 --pmi 150 --schedule
"""

import argparse
import logging
import sys
from decimal import Decimal

from fincalc.config import settings
from fincalc.engine.calculator import run_growth, run_mortgage
from fincalc.engine.formatting import cost_breakdown, format_currency, format_percentage
from fincalc.models.parameters import (
    CompoundingFrequency,
    GrowthGoal,
    GrowthParameters,
    MortgageParameters,
    PaymentFrequency,
)


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def print_insights(insights) -> None:
    if not insights:
        return
    print("  Insights:")
    for i in insights:
        print(f"    [{i.kind.value}] {i.title}: {i.message}")
    print()


def print_growth(result) -> None:
    s = result.summary
    _header(f"Compound Growth: {len(result.periods)} years")
    print(f"  Future value:         {format_currency(s.future_value)}")
    print(f"  Total contributed:    {format_currency(s.total_contributed)}")
    print(f"  Total interest:       {format_currency(s.total_interest)}")
    print(f"  Effective rate:       {format_percentage(s.effective_annual_rate)}")
    print(f"  Real (inflation adj): {format_currency(s.real_future_value)}")
    print(f"  After tax:            {format_currency(s.after_tax_future_value)}")
    print(f"  Monthly income (4%):  {format_currency(s.sustainable_monthly_income)}")
    if s.years_to_double is not None:
        print(f"  Years to double:      ~{s.years_to_double}")
    print()
    print_insights(result.insights)

    print(f"  {'Year':>4}  {'Contributions':>14}  {'Interest':>14}  {'Balance':>16}")
    for p in result.periods:
        print(
            f"  {p.year:>4}  {format_currency(p.contributions):>14}  "
            f"{format_currency(p.interest):>14}  {format_currency(p.ending_balance):>16}"
        )
    print()


def print_mortgage(result, show_schedule: bool = False) -> None:
    s = result.summary
    _header(f"Mortgage: {format_currency(s.loan_amount)} over {s.payment_count} payments")
    print(f"  Payment (P&I):        {format_currency(s.periodic_payment)}")
    print(f"  Total monthly:        {format_currency(s.total_monthly_payment)}")
    print(f"  Loan-to-value:        {format_percentage(s.loan_to_value, decimals=1)}")
    print(f"  Effective rate:       {format_percentage(s.effective_annual_rate)}")
    print(f"  Total interest:       {format_currency(s.total_interest)}")
    print(f"  Total paid:           {format_currency(s.total_paid)}")
    print(f"  Ancillary costs:      {format_currency(s.total_ancillary_cost)}")
    print(f"  Total cost:           {format_currency(s.total_cost)}")
    if s.pmi_months:
        print(f"  PMI months:           {s.pmi_months}")
    print()
    print_insights(result.insights)

    print("  Monthly breakdown:")
    for label, value in cost_breakdown(s):
        print(f"    {label:<22} {format_currency(value):>12}")
    print()

    print(f"  {'Year':>4}  {'Principal':>14}  {'Interest':>14}  {'Balance':>16}")
    for y in result.yearly:
        print(
            f"  {y.year:>4}  {format_currency(y.principal):>14}  "
            f"{format_currency(y.interest):>14}  {format_currency(y.ending_balance):>16}"
        )
    print()

    if show_schedule:
        print(f"  {'#':>4}  {'Payment':>12}  {'Principal':>12}  {'Interest':>12}  {'Balance':>14}")
        for p in result.periods:
            print(
                f"  {p.payment_index:>4}  {format_currency(p.payment):>12}  "
                f"{format_currency(p.principal_portion):>12}  {format_currency(p.interest_portion):>12}  "
                f"{format_currency(p.remaining_balance):>14}"
            )
        print()


def print_errors(errors) -> None:
    print("Invalid inputs:", file=sys.stderr)
    for e in errors:
        print(f"  {e.field}: {e.message}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compound growth and mortgage calculators")
    sub = parser.add_subparsers(dest="command", required=True)

    g = sub.add_parser("growth", help="Project compound growth with contributions")
    g.add_argument("--principal", type=Decimal, default=Decimal("0"), help="Initial deposit (default: 0)")
    g.add_argument("--contribution", type=Decimal, default=Decimal("0"), help="Recurring deposit (default: 0)")
    g.add_argument("--rate", type=Decimal, default=Decimal("7"), help="Annual rate in percent (default: 7)")
    g.add_argument("--years", type=int, default=None, help="Horizon; defaults from --goal")
    g.add_argument(
        "--compounding", choices=[f.value for f in CompoundingFrequency], default="monthly",
    )
    g.add_argument(
        "--contribution-frequency", choices=[f.value for f in PaymentFrequency], default="monthly",
    )
    g.add_argument("--inflation", type=Decimal, default=Decimal("0"), help="Annual inflation in percent")
    g.add_argument("--tax", type=Decimal, default=Decimal("0"), help="Tax rate on gains in percent")
    g.add_argument("--goal", choices=[goal.value for goal in GrowthGoal], default="retirement")

    m = sub.add_parser("mortgage", help="Amortize a fixed-rate mortgage")
    m.add_argument("--price", type=Decimal, required=True, help="Home price")
    m.add_argument("--down", type=Decimal, required=True, help="Down payment")
    m.add_argument("--rate", type=Decimal, required=True, help="Annual rate in percent")
    m.add_argument("--term", type=int, default=30, help="Term in years (default: 30)")
    m.add_argument("--frequency", choices=[f.value for f in PaymentFrequency], default="monthly")
    m.add_argument("--property-tax", type=Decimal, default=Decimal("0"), help="Annual property tax")
    m.add_argument("--insurance", type=Decimal, default=Decimal("0"), help="Annual home insurance")
    m.add_argument("--pmi", type=Decimal, default=Decimal("0"), help="Monthly PMI")
    m.add_argument("--hoa", type=Decimal, default=Decimal("0"), help="Monthly HOA dues")
    m.add_argument("--schedule", action="store_true", help="Print every payment")

    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    if args.command == "growth":
        outcome = run_growth(GrowthParameters(
            principal=args.principal,
            contribution=args.contribution,
            annual_rate=args.rate,
            years=args.years,
            compounding=CompoundingFrequency(args.compounding),
            contribution_frequency=PaymentFrequency(args.contribution_frequency),
            inflation_rate=args.inflation,
            tax_rate=args.tax,
            goal=GrowthGoal(args.goal),
        ))
        if not outcome.ok:
            print_errors(outcome.errors)
            return 1
        print_growth(outcome.result)
        return 0

    outcome = run_mortgage(MortgageParameters(
        home_price=args.price,
        down_payment=args.down,
        annual_rate=args.rate,
        term_years=args.term,
        payment_frequency=PaymentFrequency(args.frequency),
        property_tax=args.property_tax,
        home_insurance=args.insurance,
        pmi=args.pmi,
        hoa=args.hoa,
    ))
    if not outcome.ok:
        print_errors(outcome.errors)
        return 1
    print_mortgage(outcome.result, show_schedule=args.schedule)
    return 0


if __name__ == "__main__":
    sys.exit(main())
