"""Decimal arithmetic core.

Every monetary and rate value in the engine is a Decimal. The pipelines run
inside money_context() so results never depend on the caller's global
decimal context.
"""

from contextlib import contextmanager
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

MONEY_CONTEXT = Context(
    prec=28,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


class DecimalDomainError(ArithmeticError):
    """Raised for arithmetic the engine refuses to perform (e.g. x / 0)."""


@contextmanager
def money_context():
    """Run a block under a private copy of MONEY_CONTEXT."""
    with localcontext(MONEY_CONTEXT) as ctx:
        yield ctx


def to_decimal(value) -> Decimal:
    """Coerce int / str / Decimal (and float via str) to a finite Decimal."""
    if isinstance(value, bool):
        raise DecimalDomainError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise DecimalDomainError(f"Not a number: {value!r}") from None
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise DecimalDomainError(f"Not a number: {value!r}")

    if not result.is_finite():
        raise DecimalDomainError(f"Not a finite number: {value!r}")
    return result


def add(a: Decimal, b: Decimal) -> Decimal:
    with money_context():
        return a + b


def subtract(a: Decimal, b: Decimal) -> Decimal:
    with money_context():
        return a - b


def multiply(a: Decimal, b: Decimal) -> Decimal:
    with money_context():
        return a * b


def divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Exact-zero denominators are a caller bug, not a value."""
    if denominator == 0:
        raise DecimalDomainError(f"Division of {numerator} by zero")
    with money_context():
        return numerator / denominator


def power(base: Decimal, exponent: int) -> Decimal:
    """Integer powers only; fractional exponents are out of the engine's domain."""
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise DecimalDomainError(f"Exponent must be an integer, got {exponent!r}")
    if base == 0 and exponent < 0:
        raise DecimalDomainError("Zero raised to a negative power")
    with money_context():
        return base ** exponent


def minimum(a: Decimal, b: Decimal) -> Decimal:
    return a if a <= b else b


def maximum(a: Decimal, b: Decimal) -> Decimal:
    return a if a >= b else b


def round_currency(value: Decimal, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round to the minor currency unit (cents), half-up unless told otherwise."""
    with money_context():
        return value.quantize(TWO_PLACES, rounding)


def round_rate(value: Decimal, places: Decimal = FOUR_PLACES) -> Decimal:
    with money_context():
        return value.quantize(places, ROUND_HALF_UP)
