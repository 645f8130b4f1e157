import pickle

import pytest

from fixed_point_math.exceptions import (
    ArithmeticFault,
    DivisionByZero,
    FixedPointError,
    IntermediateOverflow,
    ResultOverflow,
    fault_for,
)
from fixed_point_math.libraries.mul_div import MulDivFailure


@pytest.mark.parametrize(
    ("exception_class", "error"),
    [
        (DivisionByZero, "zero denominator"),
        (IntermediateOverflow, "multiply overflow"),
        (ResultOverflow, "narrowing overflow"),
    ],
)
def test_arithmetic_fault_pickling(exception_class: type[ArithmeticFault], error: str) -> None:
    """
    Test that the fault's `__reduce__` method allows the exception to be pickled and unpickled
    correctly.
    """

    original_exception = exception_class("int128")

    unpickled_exception = pickle.loads(pickle.dumps(original_exception))

    assert type(unpickled_exception) is exception_class
    assert unpickled_exception.error == error
    assert unpickled_exception.int_type == "int128"
    assert unpickled_exception.message == original_exception.message
    assert str(unpickled_exception) == f"Arithmetic fault (int128): {error}"


def test_base_arithmetic_fault_pickling() -> None:
    original_exception = ArithmeticFault(error="custom", int_type="uint64")

    unpickled_exception = pickle.loads(pickle.dumps(original_exception))

    assert type(unpickled_exception) is ArithmeticFault
    assert unpickled_exception.message == "Arithmetic fault (uint64): custom"


@pytest.mark.parametrize(
    ("failure", "exception_class"),
    [
        (MulDivFailure.DIVISION_BY_ZERO, DivisionByZero),
        (MulDivFailure.INTERMEDIATE_OVERFLOW, IntermediateOverflow),
        (MulDivFailure.RESULT_OVERFLOW, ResultOverflow),
    ],
)
def test_fault_for(failure: MulDivFailure, exception_class: type[ArithmeticFault]) -> None:
    fault = fault_for(failure, "int64")
    assert type(fault) is exception_class
    assert isinstance(fault, FixedPointError)
    assert fault.int_type == "int64"
