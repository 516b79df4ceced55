"""Pipeline boundary: validate, then compute, then wrap in a CalculationOutcome.

Pure computation. No I/O beyond logging. Parameters in, outcome out.
"""

import logging
from dataclasses import replace

from fincalc.engine.growth import project_growth
from fincalc.engine.insights import growth_insights, mortgage_insights
from fincalc.engine.money import to_decimal
from fincalc.engine.mortgage import amortize
from fincalc.engine.validation import validate_growth, validate_mortgage
from fincalc.models.parameters import GrowthParameters, MortgageParameters
from fincalc.models.results import CalculationOutcome, ValidationError

logger = logging.getLogger(__name__)

CALCULATION_FIELD = "calculation"
CALCULATION_MESSAGE = "Unable to complete the calculation with these inputs"

_GROWTH_DECIMALS = ("principal", "contribution", "annual_rate", "inflation_rate", "tax_rate")
_MORTGAGE_DECIMALS = (
    "home_price", "down_payment", "annual_rate",
    "property_tax", "home_insurance", "pmi", "hoa",
)


def normalize_growth(params: GrowthParameters) -> GrowthParameters:
    """Fresh copy with every numeric field as Decimal / int. Call after validation."""
    changes = {name: to_decimal(getattr(params, name)) for name in _GROWTH_DECIMALS}
    changes["years"] = int(to_decimal(params.horizon_years))
    return replace(params, **changes)


def normalize_mortgage(params: MortgageParameters) -> MortgageParameters:
    changes = {name: to_decimal(getattr(params, name)) for name in _MORTGAGE_DECIMALS}
    changes["term_years"] = int(to_decimal(params.term_years))
    return replace(params, **changes)


def _failed(errors) -> CalculationOutcome:
    return CalculationOutcome(result=None, errors=tuple(errors))


def _computation_failed(kind: str) -> CalculationOutcome:
    logger.exception("%s calculation failed", kind)
    return _failed([ValidationError(CALCULATION_FIELD, CALCULATION_MESSAGE)])


def run_growth(params: GrowthParameters) -> CalculationOutcome:
    """Validate and project a compound-growth scenario."""
    errors = validate_growth(params)
    if errors:
        logger.info("Growth parameters rejected: %s", ", ".join(e.field for e in errors))
        return _failed(errors)

    try:
        normalized = normalize_growth(params)
        result = project_growth(normalized)
        result = replace(result, insights=growth_insights(normalized, result.summary))
    except ArithmeticError:
        return _computation_failed("Growth")

    logger.debug(
        "Projected %d years, future value %s",
        len(result.periods), result.summary.future_value,
    )
    return CalculationOutcome(result=result)


def run_mortgage(params: MortgageParameters) -> CalculationOutcome:
    """Validate and amortize a mortgage scenario."""
    errors = validate_mortgage(params)
    if errors:
        logger.info("Mortgage parameters rejected: %s", ", ".join(e.field for e in errors))
        return _failed(errors)

    try:
        normalized = normalize_mortgage(params)
        result = amortize(normalized)
        result = replace(result, insights=mortgage_insights(normalized, result.summary))
    except ArithmeticError:
        return _computation_failed("Mortgage")

    logger.debug(
        "Amortized %d payments, total interest %s",
        len(result.periods), result.summary.total_interest,
    )
    return CalculationOutcome(result=result)
