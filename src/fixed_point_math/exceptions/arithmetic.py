from typing import TYPE_CHECKING, Any

from fixed_point_math.exceptions.base import FixedPointError

if TYPE_CHECKING:
    from fixed_point_math.libraries.mul_div import MulDivFailure

"""
Exceptions defined here are raised by the host (irrecoverable) contract when a mul-div operation
cannot produce a result.
"""


class ArithmeticFault(FixedPointError):
    """
    Raised when a fixed point operation cannot complete. The operation's unit of work must be
    abandoned, no partial result exists.
    """

    def __init__(self, error: str, int_type: str) -> None:
        self.error = error
        self.int_type = int_type
        super().__init__(message=f"Arithmetic fault ({int_type}): {error}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.error, self.int_type)


class _FixedReasonFault(ArithmeticFault):
    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.int_type,)


class DivisionByZero(_FixedReasonFault):
    def __init__(self, int_type: str) -> None:
        super().__init__(error="zero denominator", int_type=int_type)


class IntermediateOverflow(_FixedReasonFault):
    """
    The product term does not fit at the computation width, and no wider width is available.
    """

    def __init__(self, int_type: str) -> None:
        super().__init__(error="multiply overflow", int_type=int_type)


class ResultOverflow(_FixedReasonFault):
    """
    The result does not fit back into the operand's width.
    """

    def __init__(self, int_type: str) -> None:
        super().__init__(error="narrowing overflow", int_type=int_type)


def fault_for(failure: "MulDivFailure", int_type: str) -> ArithmeticFault:
    """
    Build the fault matching a failed mul-div computation.
    """

    from fixed_point_math.libraries.mul_div import MulDivFailure

    match failure:
        case MulDivFailure.DIVISION_BY_ZERO:
            return DivisionByZero(int_type)
        case MulDivFailure.INTERMEDIATE_OVERFLOW:
            return IntermediateOverflow(int_type)
        case MulDivFailure.RESULT_OVERFLOW:
            return ResultOverflow(int_type)
