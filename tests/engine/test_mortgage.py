from dataclasses import replace
from decimal import ROUND_DOWN, Decimal, localcontext

from fincalc.engine.mortgage import (
    amortization_schedule,
    amortize,
    monthly_costs,
    monthly_payment,
    periodic_payment,
    pmi_months,
    requires_pmi,
    yearly_rollup,
)
from fincalc.models.parameters import MortgageParameters, PaymentFrequency


class TestMonthlyPayment:
    def test_canonical_mortgage(self):
        """$240K loan at 6% for 30 years."""
        assert monthly_payment(Decimal("240000"), Decimal("6"), 30) == Decimal("1438.92")

    def test_standard_mortgage(self):
        """$400K loan at 7% for 30 years."""
        assert monthly_payment(Decimal("400000"), Decimal("7"), 30) == Decimal("2661.21")

    def test_zero_rate(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 30)
        assert pmt == Decimal("1000.00")

    def test_zero_principal(self):
        pmt = monthly_payment(Decimal("0"), Decimal("7"), 30)
        assert pmt == Decimal("0")

    def test_annual_zero_rate(self):
        pmt = periodic_payment(Decimal("150000"), Decimal("0"), 15, PaymentFrequency.ANNUALLY)
        assert pmt == Decimal("10000.00")


class TestAmortizationSchedule:
    def test_payment_count(self, canonical_mortgage):
        assert len(amortization_schedule(canonical_mortgage)) == 360

    def test_first_payment_mostly_interest(self, canonical_mortgage):
        first = amortization_schedule(canonical_mortgage)[0]
        # 240000 * 0.06/12
        assert first.interest_portion == Decimal("1200.00")
        assert first.principal_portion == Decimal("238.92")
        assert first.remaining_balance == Decimal("239761.08")

    def test_balance_decreases(self, canonical_mortgage):
        schedule = amortization_schedule(canonical_mortgage)
        for i in range(1, len(schedule)):
            assert schedule[i].remaining_balance < schedule[i - 1].remaining_balance

    def test_final_balance_exactly_zero(self, canonical_mortgage):
        assert amortization_schedule(canonical_mortgage)[-1].remaining_balance == Decimal("0")

    def test_principal_conserved(self, canonical_mortgage):
        schedule = amortization_schedule(canonical_mortgage)
        assert sum(p.principal_portion for p in schedule) == Decimal("240000.00")
        assert schedule[-1].cumulative_principal == Decimal("240000.00")

    def test_each_payment_splits_exactly(self, canonical_mortgage):
        for p in amortization_schedule(canonical_mortgage):
            assert p.payment == p.principal_portion + p.interest_portion

    def test_level_payment_until_last(self, canonical_mortgage):
        schedule = amortization_schedule(canonical_mortgage)
        assert all(p.payment == Decimal("1438.92") for p in schedule[:-1])
        assert abs(schedule[-1].payment - Decimal("1438.92")) < Decimal("5")

    def test_zero_rate_linear(self, canonical_mortgage):
        params = replace(canonical_mortgage, annual_rate=Decimal("0"))
        schedule = amortization_schedule(params)
        assert all(p.interest_portion == 0 for p in schedule)
        assert all(p.principal_portion == Decimal("666.67") for p in schedule[:-1])
        assert schedule[-1].remaining_balance == 0
        assert sum(p.principal_portion for p in schedule) == Decimal("240000.00")

    def test_quarterly_payments(self, canonical_mortgage):
        params = replace(canonical_mortgage, payment_frequency=PaymentFrequency.QUARTERLY)
        schedule = amortization_schedule(params)
        assert len(schedule) == 120
        assert [p.month_in_year for p in schedule[:4]] == [3, 6, 9, 12]
        assert schedule[4].year == 2

    def test_monthly_calendar(self, canonical_mortgage):
        schedule = amortization_schedule(canonical_mortgage)
        assert schedule[0].month_in_year == 1
        assert schedule[11].month_in_year == 12
        assert schedule[12].year == 2
        assert schedule[-1].year == 30


class TestYearlyRollup:
    def test_one_row_per_year(self, canonical_mortgage):
        yearly = yearly_rollup(amortization_schedule(canonical_mortgage))
        assert len(yearly) == 30
        assert yearly[-1].ending_balance == 0

    def test_yearly_totals_match(self, canonical_mortgage):
        schedule = amortization_schedule(canonical_mortgage)
        yearly = yearly_rollup(schedule)
        assert sum(y.interest for y in yearly) == sum(p.interest_portion for p in schedule)
        assert sum(y.principal for y in yearly) == sum(p.principal_portion for p in schedule)

    def test_payments_equal_12_installments(self, canonical_mortgage):
        yearly = yearly_rollup(amortization_schedule(canonical_mortgage))
        for y in yearly[:-1]:
            assert y.payments == Decimal("1438.92") * 12


class TestPMI:
    def test_twenty_percent_down_has_no_pmi(self, canonical_mortgage):
        params = replace(canonical_mortgage, pmi=Decimal("100"))
        assert not requires_pmi(params)
        assert pmi_months(params, amortization_schedule(params)) == 0

    def test_low_down_payment_requires_pmi(self, insured_mortgage):
        assert requires_pmi(insured_mortgage)

    def test_pmi_stops_at_eighty_percent(self, insured_mortgage):
        schedule = amortization_schedule(insured_mortgage)
        months = pmi_months(insured_mortgage, schedule)
        assert 0 < months < 360
        cutoff = insured_mortgage.home_price * Decimal("0.8")
        assert schedule[months - 1].remaining_balance <= cutoff
        assert schedule[months - 2].remaining_balance > cutoff


class TestMonthlyCosts:
    def test_ancillaries_converted_to_monthly(self, insured_mortgage):
        costs = monthly_costs(insured_mortgage, Decimal("2401.86"))
        assert costs.property_tax == Decimal("400.00")
        assert costs.home_insurance == Decimal("100.00")
        assert costs.pmi == Decimal("150.00")
        assert costs.hoa == Decimal("50.00")
        assert costs.total == Decimal("3101.86")

    def test_quarterly_payment_expressed_monthly(self, canonical_mortgage):
        params = replace(canonical_mortgage, payment_frequency=PaymentFrequency.QUARTERLY)
        costs = monthly_costs(params, Decimal("3000"))
        assert costs.principal_and_interest == Decimal("1000.00")


class TestAmortize:
    def test_canonical_summary(self, canonical_mortgage):
        s = amortize(canonical_mortgage).summary
        assert s.loan_amount == Decimal("240000.00")
        assert s.periodic_payment == Decimal("1438.92")
        assert s.payment_count == 360
        assert abs(s.total_interest - Decimal("278011")) < Decimal("10")
        assert s.total_principal == Decimal("240000.00")
        assert s.total_paid == s.total_principal + s.total_interest
        assert s.loan_to_value == Decimal("80.0000")
        assert s.down_payment_pct == Decimal("20.0000")
        assert s.effective_annual_rate == Decimal("6.1678")

    def test_total_cost_includes_down_payment_and_ancillaries(self, insured_mortgage):
        s = amortize(insured_mortgage).summary
        assert s.total_ancillary_cost > 0
        assert s.total_cost == Decimal("20000.00") + s.total_paid + s.total_ancillary_cost

    def test_ancillary_cost_accumulation(self, insured_mortgage):
        s = amortize(insured_mortgage).summary
        fixed = Decimal("400.00") + Decimal("100.00") + Decimal("50.00")
        expected = fixed * 360 + Decimal("150.00") * s.pmi_months
        assert s.total_ancillary_cost == expected

    def test_interest_monotonic_in_rate(self, canonical_mortgage):
        totals = [
            amortize(replace(canonical_mortgage, annual_rate=Decimal(rate))).summary.total_interest
            for rate in ("3", "4.5", "6", "7.5")
        ]
        assert totals == sorted(totals)
        assert len(set(totals)) == len(totals)

    def test_short_term_annual(self):
        params = MortgageParameters(
            home_price=Decimal("100000"),
            down_payment=Decimal("20000"),
            annual_rate=Decimal("5"),
            term_years=5,
            payment_frequency=PaymentFrequency.ANNUALLY,
        )
        result = amortize(params)
        assert len(result.periods) == 5
        assert all(p.month_in_year == 12 for p in result.periods)
        assert result.periods[-1].remaining_balance == 0
        assert len(result.yearly) == 5

    def test_idempotent(self, insured_mortgage):
        assert amortize(insured_mortgage) == amortize(insured_mortgage)


class TestCallerContext:
    """Results must not depend on the decimal context the caller happens to be in."""

    def test_payment_ignores_low_precision(self):
        expected = monthly_payment(Decimal("240000"), Decimal("6.125"), 30)
        with localcontext() as ctx:
            ctx.prec = 6
            assert monthly_payment(Decimal("240000"), Decimal("6.125"), 30) == expected
        assert expected == Decimal("1458.27")

    def test_schedule_ignores_low_precision(self, canonical_mortgage):
        expected = amortization_schedule(canonical_mortgage)
        with localcontext() as ctx:
            ctx.prec = 6
            schedule = amortization_schedule(canonical_mortgage)
        assert schedule == expected
        assert schedule[0].remaining_balance == Decimal("239761.08")

    def test_summary_ignores_rounding_mode(self, insured_mortgage):
        expected = amortize(insured_mortgage)
        with localcontext() as ctx:
            ctx.prec = 8
            ctx.rounding = ROUND_DOWN
            assert amortize(insured_mortgage) == expected
