from fixed_point_math.exceptions.arithmetic import (
    ArithmeticFault,
    DivisionByZero,
    IntermediateOverflow,
    ResultOverflow,
    fault_for,
)
from fixed_point_math.exceptions.base import (
    FixedPointError,
    FixedPointValueError,
)

from . import arithmetic, base

__all__ = (
    "ArithmeticFault",
    "DivisionByZero",
    "FixedPointError",
    "FixedPointValueError",
    "IntermediateOverflow",
    "ResultOverflow",
    "arithmetic",
    "base",
    "fault_for",
)
