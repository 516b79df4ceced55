"""Input validation: parameter set in, list of field-level violations out.

Every rule runs; nothing short-circuits, so a caller can surface all
problems at once. Expected failures are returned, never raised.
"""

from fincalc.engine.constants import (
    GROWTH_BOUNDS,
    MIN_DOWN_PAYMENT_PCT,
    MORTGAGE_BOUNDS,
    FieldBounds,
)
from fincalc.engine.formatting import format_number
from fincalc.engine.money import DecimalDomainError, money_context, to_decimal
from fincalc.models.parameters import (
    CompoundingFrequency,
    GrowthGoal,
    GrowthParameters,
    MortgageParameters,
    PaymentFrequency,
)
from fincalc.models.results import ValidationError


def check_field(field_name: str, value, bounds: FieldBounds) -> ValidationError | None:
    """Check one numeric value against its bounds rule."""
    if value is None:
        return ValidationError(field_name, f"{field_name} is required")
    try:
        number = to_decimal(value)
    except DecimalDomainError:
        return ValidationError(field_name, f"{field_name} must be a valid number")

    if bounds.integer and number != number.to_integral_value():
        return ValidationError(field_name, f"{field_name} must be a whole number")
    if number < bounds.min:
        return ValidationError(field_name, f"{field_name} must be at least {format_number(bounds.min)}")
    if number > bounds.max:
        return ValidationError(field_name, f"{field_name} must be no more than {format_number(bounds.max)}")
    return None


def _check_table(params, table: dict[str, FieldBounds], values: dict | None = None) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for field_name, bounds in table.items():
        value = values[field_name] if values and field_name in values else getattr(params, field_name)
        error = check_field(field_name, value, bounds)
        if error is not None:
            errors.append(error)
    return errors


def _check_enum(field_name: str, value, enum_cls) -> ValidationError | None:
    if isinstance(value, enum_cls):
        return None
    allowed = ", ".join(m.value for m in enum_cls)
    return ValidationError(field_name, f"{field_name} must be one of: {allowed}")


def validate_growth(params: GrowthParameters) -> list[ValidationError]:
    """Validate a compound-growth parameter set."""
    errors: list[ValidationError] = []

    goal_error = _check_enum("goal", params.goal, GrowthGoal)
    if goal_error is not None:
        errors.append(goal_error)

    # `years` falls back to the goal default; validate whichever will be used
    years = params.years if params.years is not None or goal_error else params.horizon_years
    errors.extend(_check_table(params, GROWTH_BOUNDS, {"years": years}))

    for field_name, enum_cls in (
        ("compounding", CompoundingFrequency),
        ("contribution_frequency", PaymentFrequency),
    ):
        error = _check_enum(field_name, getattr(params, field_name), enum_cls)
        if error is not None:
            errors.append(error)

    return errors


def validate_mortgage(params: MortgageParameters) -> list[ValidationError]:
    """Validate a mortgage parameter set, including cross-field down payment rules."""
    errors = _check_table(params, MORTGAGE_BOUNDS)

    error = _check_enum("payment_frequency", params.payment_frequency, PaymentFrequency)
    if error is not None:
        errors.append(error)

    # Cross-field rules only make sense once both amounts parsed
    failed = {e.field for e in errors}
    if "home_price" not in failed and "down_payment" not in failed:
        price = to_decimal(params.home_price)
        down = to_decimal(params.down_payment)
        with money_context():
            below_minimum = down * 100 < price * MIN_DOWN_PAYMENT_PCT
        if down >= price:
            errors.append(ValidationError(
                "down_payment", "down_payment must be less than home_price",
            ))
        elif below_minimum:
            errors.append(ValidationError(
                "down_payment",
                f"down_payment must be at least {format_number(MIN_DOWN_PAYMENT_PCT)}% of home_price",
            ))

    return errors


def validate_goal_plan(
    goal_amount,
    annual_rate,
    years,
    current_savings,
    frequency,
) -> list[ValidationError]:
    """Validate inputs to a required-contribution calculation."""
    checks = (
        ("goal_amount", goal_amount, GROWTH_BOUNDS["principal"]),
        ("annual_rate", annual_rate, GROWTH_BOUNDS["annual_rate"]),
        ("years", years, GROWTH_BOUNDS["years"]),
        ("current_savings", current_savings, GROWTH_BOUNDS["principal"]),
    )
    errors = [e for e in (check_field(*check) for check in checks) if e is not None]

    error = _check_enum("frequency", frequency, PaymentFrequency)
    if error is not None:
        errors.append(error)
    return errors
