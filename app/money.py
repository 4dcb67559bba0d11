from decimal import ROUND_HALF_UP, Decimal
from numbers import Real

TWO_DP = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Coerce a strategy result to Decimal. Floats go through str so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    """Round to 2 dp, halves away from zero (0.125 → 0.13, -0.125 → -0.13)."""
    return amount.quantize(TWO_DP, rounding=ROUND_HALF_UP)
