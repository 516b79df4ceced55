"""Canonical test fixtures used across all engine and API tests.

Mortgage: $300K home, $60K down (80% LTV), 6% rate, 30yr fixed, monthly.
Growth: $0 start, $500/mo, 7% compounded monthly, 30 years.
"""

import pytest
from decimal import Decimal

from fincalc.models.parameters import (
    CompoundingFrequency,
    GrowthGoal,
    GrowthParameters,
    MortgageParameters,
    PaymentFrequency,
)


@pytest.fixture
def canonical_mortgage() -> MortgageParameters:
    """$240K loan at 6% for 30 years."""
    return MortgageParameters(
        home_price=Decimal("300000"),
        down_payment=Decimal("60000"),
        annual_rate=Decimal("6"),
        term_years=30,
        payment_frequency=PaymentFrequency.MONTHLY,
    )


@pytest.fixture
def insured_mortgage() -> MortgageParameters:
    """5% down, so PMI applies until the balance reaches 80% of price."""
    return MortgageParameters(
        home_price=Decimal("400000"),
        down_payment=Decimal("20000"),
        annual_rate=Decimal("6.5"),
        term_years=30,
        property_tax=Decimal("4800"),
        home_insurance=Decimal("1200"),
        pmi=Decimal("150"),
        hoa=Decimal("50"),
    )


@pytest.fixture
def canonical_growth() -> GrowthParameters:
    """$500/month at 7% for 30 years, nothing up front."""
    return GrowthParameters(
        principal=Decimal("0"),
        contribution=Decimal("500"),
        annual_rate=Decimal("7"),
        years=30,
        compounding=CompoundingFrequency.MONTHLY,
        contribution_frequency=PaymentFrequency.MONTHLY,
        goal=GrowthGoal.RETIREMENT,
    )


@pytest.fixture
def taxed_growth() -> GrowthParameters:
    """$10K start plus $200/month, with inflation and tax on gains."""
    return GrowthParameters(
        principal=Decimal("10000"),
        contribution=Decimal("200"),
        annual_rate=Decimal("6"),
        years=20,
        inflation_rate=Decimal("3"),
        tax_rate=Decimal("15"),
    )
