"""
Exact floor(x*y/z) and ceil(x*y/z) for fixed-width integers.

The functions here never raise for arithmetic failures. A failed computation returns a
`MulDivFailure` tag instead of an `int`, and the contract layer decides whether that becomes `None`
or an `ArithmeticFault`.

Python integers do not overflow, so every width limit is enforced by an explicit range check
against the `IntegerType` bounds.
"""

from enum import Enum

from fixed_point_math.rounding import Rounding
from fixed_point_math.types import IntegerType


class MulDivFailure(Enum):
    DIVISION_BY_ZERO = "division by zero"
    INTERMEDIATE_OVERFLOW = "intermediate overflow"
    RESULT_OVERFLOW = "result overflow"


type MulDivResult = int | MulDivFailure


def truncating_div(numerator: int, denominator: int) -> int:
    """
    Perform integer division, rounding towards zero.
    """

    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def rem_euclid(numerator: int, denominator: int) -> int:
    """
    The non-negative remainder of numerator / denominator.
    """

    return numerator % abs(denominator)


def checked_mul(x: int, y: int, int_type: IntegerType) -> int | None:
    product = x * y
    return product if int_type.contains(product) else None


def narrow(value: int, int_type: IntegerType) -> MulDivResult:
    """
    Convert a value computed at a wider tier back to `int_type`.
    """

    return value if int_type.contains(value) else MulDivFailure.RESULT_OVERFLOW


def _unsigned_div_floor(r: int, z: int) -> int:
    # operands are non-negative, so truncation is the floor
    return truncating_div(r, z)


def _unsigned_div_ceil(r: int, z: int) -> int:
    return truncating_div(r, z) + (1 if rem_euclid(r, z) > 0 else 0)


def _signed_div_floor(r: int, z: int) -> int:
    if r != 0 and (r < 0) != (z < 0):
        # truncation takes the ceiling of a negative quotient
        return truncating_div(r, z) - (1 if rem_euclid(r, z) > 0 else 0)
    # truncation takes the floor of a positive or zero quotient
    return truncating_div(r, z)


def _signed_div_ceil(r: int, z: int) -> int:
    if r == 0 or (r < 0) != (z < 0):
        # truncation takes the ceiling of a negative or zero quotient
        return truncating_div(r, z)
    # truncation takes the floor of a positive quotient
    return truncating_div(r, z) + (1 if rem_euclid(r, z) > 0 else 0)


def div_floor(r: int, z: int, int_type: IntegerType) -> MulDivResult:
    """
    Calculates floor(r / z) at the width of `int_type`.
    """

    if z == 0:
        return MulDivFailure.DIVISION_BY_ZERO
    quotient = _signed_div_floor(r, z) if int_type.signed else _unsigned_div_floor(r, z)
    # MIN / -1 is the only quotient that can escape the tier
    return narrow(quotient, int_type)


def div_ceil(r: int, z: int, int_type: IntegerType) -> MulDivResult:
    """
    Calculates ceil(r / z) at the width of `int_type`.
    """

    if z == 0:
        return MulDivFailure.DIVISION_BY_ZERO
    quotient = _signed_div_ceil(r, z) if int_type.signed else _unsigned_div_ceil(r, z)
    return narrow(quotient, int_type)


def mul_div_floor(x: int, y: int, z: int, int_type: IntegerType) -> MulDivResult:
    """
    Calculates floor(x * y / z), requiring the product to fit in `int_type`.
    """

    if z == 0:
        return MulDivFailure.DIVISION_BY_ZERO
    r = checked_mul(x, y, int_type)
    if r is None:
        return MulDivFailure.INTERMEDIATE_OVERFLOW
    return div_floor(r, z, int_type)


def mul_div_ceil(x: int, y: int, z: int, int_type: IntegerType) -> MulDivResult:
    """
    Calculates ceil(x * y / z), requiring the product to fit in `int_type`.
    """

    if z == 0:
        return MulDivFailure.DIVISION_BY_ZERO
    r = checked_mul(x, y, int_type)
    if r is None:
        return MulDivFailure.INTERMEDIATE_OVERFLOW
    return div_ceil(r, z, int_type)


def mul_div(x: int, y: int, z: int, int_type: IntegerType, rounding: Rounding) -> MulDivResult:
    if rounding == Rounding.FLOOR:
        return mul_div_floor(x, y, z, int_type)
    return mul_div_ceil(x, y, z, int_type)


def scaled_mul_div(
    x: int,
    y: int,
    z: int,
    int_type: IntegerType,
    rounding: Rounding,
) -> MulDivResult:
    """
    Calculates x * y / z with the given rounding, retrying once at the next wider tier if the
    product overflows `int_type`.

    The wide result is narrowed back to `int_type`. A terminal tier has nowhere to escalate, so an
    overflowing product there is returned as `INTERMEDIATE_OVERFLOW`.
    """

    result = mul_div(x, y, z, int_type, rounding)
    if result is not MulDivFailure.INTERMEDIATE_OVERFLOW or int_type.wider is None:
        return result

    wide_result = mul_div(x, y, z, int_type.wider, rounding)
    if isinstance(wide_result, MulDivFailure):
        return wide_result
    return narrow(wide_result, int_type)
