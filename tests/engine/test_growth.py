from dataclasses import replace
from decimal import Decimal, localcontext

from fincalc.engine.growth import (
    after_tax_value,
    annual_contribution,
    effective_annual_rate,
    growth_ledger,
    project_growth,
    real_value,
    sustainable_monthly_income,
    years_to_double,
)
from fincalc.models.parameters import (
    CompoundingFrequency,
    GrowthGoal,
    GrowthParameters,
    PaymentFrequency,
)


class TestProjectGrowth:
    def test_canonical_example(self, canonical_growth):
        """$500/mo at 7% monthly for 30 years, deposits earning from their first month."""
        result = project_growth(canonical_growth)
        assert len(result.periods) == 30
        assert result.summary.total_contributed == Decimal("180000.00")
        # Deposits post before each month's interest, which lands a little above the 612k usually quoted
        assert Decimal("612500") < result.summary.future_value < Decimal("614500")

    def test_interest_plus_contributions_equals_balance(self, canonical_growth):
        result = project_growth(canonical_growth)
        s = result.summary
        assert s.total_contributed + s.total_interest == s.future_value

    def test_year_rows_chain(self, canonical_growth):
        periods = growth_ledger(canonical_growth)
        for prev, cur in zip(periods, periods[1:]):
            assert cur.starting_balance == prev.ending_balance
        for p in periods:
            assert p.ending_balance == p.starting_balance + p.contributions + p.interest

    def test_annual_compounding_lump_sum(self):
        params = GrowthParameters(
            principal=Decimal("1000"),
            annual_rate=Decimal("10"),
            years=2,
            compounding=CompoundingFrequency.ANNUALLY,
        )
        periods = growth_ledger(params)
        assert periods[0].ending_balance == Decimal("1100.00")
        assert periods[1].ending_balance == Decimal("1210.00")

    def test_contribution_posts_before_interest(self):
        """Annual compounding: the whole year's deposit earns that year's interest."""
        params = GrowthParameters(
            contribution=Decimal("100"),
            annual_rate=Decimal("10"),
            years=2,
            compounding=CompoundingFrequency.ANNUALLY,
            contribution_frequency=PaymentFrequency.MONTHLY,
        )
        periods = growth_ledger(params)
        assert periods[0].interest == Decimal("120.00")
        assert periods[0].ending_balance == Decimal("1320.00")
        assert periods[1].interest == Decimal("252.00")
        assert periods[1].ending_balance == Decimal("2772.00")

    def test_uneven_split_still_deposits_full_year(self):
        """$400/yr over 365 daily sub-periods does not divide evenly into cents."""
        params = GrowthParameters(
            contribution=Decimal("100"),
            annual_rate=Decimal("4"),
            years=3,
            compounding=CompoundingFrequency.DAILY,
            contribution_frequency=PaymentFrequency.QUARTERLY,
        )
        for p in growth_ledger(params):
            assert p.contributions == Decimal("400.00")

    def test_zero_rate_is_linear(self):
        params = GrowthParameters(
            principal=Decimal("1000"),
            contribution=Decimal("500"),
            annual_rate=Decimal("0"),
            years=10,
        )
        result = project_growth(params)
        assert result.summary.total_interest == Decimal("0")
        assert result.summary.future_value == Decimal("61000.00")
        assert all(p.interest == 0 for p in result.periods)

    def test_monotonic_in_rate(self, canonical_growth):
        values = [
            project_growth(replace(canonical_growth, annual_rate=Decimal(rate))).summary.future_value
            for rate in ("3", "5", "7", "9")
        ]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_goal_default_horizon(self):
        params = GrowthParameters(contribution=Decimal("100"), goal=GrowthGoal.HOME_PURCHASE)
        assert len(project_growth(params).periods) == 5

    def test_idempotent(self, taxed_growth):
        assert project_growth(taxed_growth) == project_growth(taxed_growth)


class TestInflationAndTax:
    def test_real_value_never_exceeds_nominal(self, taxed_growth):
        for p in project_growth(taxed_growth).periods:
            assert p.real_value <= p.ending_balance

    def test_no_inflation_means_real_equals_nominal(self, canonical_growth):
        for p in project_growth(canonical_growth).periods:
            assert p.real_value == p.ending_balance

    def test_real_value_formula(self):
        assert real_value(Decimal("1000"), Decimal("10"), 2) == Decimal("810.00")

    def test_after_tax_taxes_gain_only(self):
        assert after_tax_value(Decimal("15000"), Decimal("10000"), Decimal("20")) == Decimal("14000.00")

    def test_after_tax_ignores_losses(self):
        assert after_tax_value(Decimal("9000"), Decimal("10000"), Decimal("20")) == Decimal("9000.00")

    def test_after_tax_below_nominal(self, taxed_growth):
        summary = project_growth(taxed_growth).summary
        assert summary.after_tax_future_value < summary.future_value
        assert summary.real_future_value < summary.future_value


class TestSummaryMetrics:
    def test_effective_annual_rate(self, canonical_growth):
        assert effective_annual_rate(canonical_growth) == Decimal("7.2290")

    def test_effective_rate_annual_compounding_is_nominal(self):
        params = GrowthParameters(annual_rate=Decimal("5"), compounding=CompoundingFrequency.ANNUALLY)
        assert effective_annual_rate(params) == Decimal("5.0000")

    def test_years_to_double(self):
        assert years_to_double(Decimal("7")) == 10
        assert years_to_double(Decimal("8")) == 9
        assert years_to_double(Decimal("0")) is None

    def test_sustainable_income(self):
        assert sustainable_monthly_income(Decimal("600000")) == Decimal("2000.00")

    def test_annual_contribution(self, canonical_growth):
        assert annual_contribution(canonical_growth) == Decimal("6000.00")


class TestCallerContext:
    def test_ledger_ignores_low_precision(self, taxed_growth):
        expected = growth_ledger(taxed_growth)
        with localcontext() as ctx:
            ctx.prec = 6
            assert growth_ledger(taxed_growth) == expected

    def test_projection_ignores_low_precision(self, canonical_growth):
        expected = project_growth(canonical_growth)
        with localcontext() as ctx:
            ctx.prec = 5
            result = project_growth(canonical_growth)
        assert result == expected
        assert result.summary.future_value > Decimal("612500")

    def test_metrics_ignore_low_precision(self, canonical_growth):
        expected = (effective_annual_rate(canonical_growth), real_value(Decimal("100000"), Decimal("3"), 10))
        with localcontext() as ctx:
            ctx.prec = 4
            assert effective_annual_rate(canonical_growth) == expected[0]
            assert real_value(Decimal("100000"), Decimal("3"), 10) == expected[1]
