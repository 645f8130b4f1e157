"""Fixed point contracts for computing scaled ratios of fixed-width integers.

Two contracts share the same mul-div engine and differ only in how failures reach the caller:
- `FixedPoint` (recoverable) returns `None` for a zero denominator, an overflowing product or a
  result that does not fit the operand width.
- `HostFixedPoint` (irrecoverable) retries an overflowing product once at the next wider width,
  then raises an `ArithmeticFault` for any condition that still prevents a result.
"""

from abc import abstractmethod
from typing import ClassVar, Protocol

from fixed_point_math.exceptions import fault_for
from fixed_point_math.libraries.mul_div import MulDivFailure, MulDivResult, mul_div, scaled_mul_div
from fixed_point_math.logging import logger
from fixed_point_math.rounding import Rounding
from fixed_point_math.types import (
    INT64,
    INT128,
    INT256,
    INTEGER_TYPES,
    UINT64,
    UINT128,
    UINT256,
    IntegerType,
    get_integer_type,
)


class FixedPoint(Protocol):
    """Protocol for the recoverable fixed point operations.

    Every failure returns `None`; callers must check before using a result.
    """

    int_type: IntegerType

    @abstractmethod
    def fixed_mul_floor(self, x: int, y: int, denominator: int) -> int | None:
        """Safely calculates floor(x * y / denominator)."""
        ...

    @abstractmethod
    def fixed_mul_ceil(self, x: int, y: int, denominator: int) -> int | None:
        """Safely calculates ceil(x * y / denominator)."""
        ...

    @abstractmethod
    def fixed_div_floor(self, x: int, y: int, denominator: int) -> int | None:
        """Safely calculates floor(x * denominator / y)."""
        ...

    @abstractmethod
    def fixed_div_ceil(self, x: int, y: int, denominator: int) -> int | None:
        """Safely calculates ceil(x * denominator / y)."""
        ...


class HostFixedPoint(Protocol):
    """Protocol for the irrecoverable fixed point operations.

    Raises `DivisionByZero`, `IntermediateOverflow` or `ResultOverflow` if the divisor is 0, a
    phantom overflow cannot be absorbed by the next wider width, or the result does not fit the
    operand width.
    """

    int_type: IntegerType

    @abstractmethod
    def fixed_mul_floor(self, x: int, y: int, denominator: int) -> int:
        """Safely calculates floor(x * y / denominator)."""
        ...

    @abstractmethod
    def fixed_mul_ceil(self, x: int, y: int, denominator: int) -> int:
        """Safely calculates ceil(x * y / denominator)."""
        ...

    @abstractmethod
    def fixed_div_floor(self, x: int, y: int, denominator: int) -> int:
        """Safely calculates floor(x * denominator / y)."""
        ...

    @abstractmethod
    def fixed_div_ceil(self, x: int, y: int, denominator: int) -> int:
        """Safely calculates ceil(x * denominator / y)."""
        ...


class _FixedPointBase:
    def __init__(self, int_type: IntegerType) -> None:
        self.int_type = int_type

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.int_type})"

    def _validated_mul_div(self, x: int, y: int, z: int, rounding: Rounding) -> MulDivResult:
        for value in (x, y, z):
            self.int_type.validate(value)
        return self._mul_div(x, y, z, rounding)

    def _mul_div(self, x: int, y: int, z: int, rounding: Rounding) -> MulDivResult:
        raise NotImplementedError


class RecoverableFixedPoint(_FixedPointBase):
    """Recoverable contract, computed at the operand's own width.

    The 64-bit tiers retry an overflowing product at 128 bits. The 128 and 256-bit tiers never
    escalate, so callers must pre-scale operands that could overflow.
    """

    def __init__(self, int_type: IntegerType) -> None:
        super().__init__(int_type)
        self.escalates = int_type.bits == 64

    def _mul_div(self, x: int, y: int, z: int, rounding: Rounding) -> MulDivResult:
        if self.escalates:
            return scaled_mul_div(x, y, z, self.int_type, rounding)
        return mul_div(x, y, z, self.int_type, rounding)

    def _compute(self, x: int, y: int, z: int, rounding: Rounding) -> int | None:
        result = self._validated_mul_div(x, y, z, rounding)
        if isinstance(result, MulDivFailure):
            logger.debug(
                f"{self.int_type} mul-div ({x}, {y}, {z}) returned no result: {result.value}"
            )
            return None
        return result

    def fixed_mul_floor(self, x: int, y: int, denominator: int) -> int | None:
        return self._compute(x, y, denominator, Rounding.FLOOR)

    def fixed_mul_ceil(self, x: int, y: int, denominator: int) -> int | None:
        return self._compute(x, y, denominator, Rounding.CEIL)

    def fixed_div_floor(self, x: int, y: int, denominator: int) -> int | None:
        return self._compute(x, denominator, y, Rounding.FLOOR)

    def fixed_div_ceil(self, x: int, y: int, denominator: int) -> int | None:
        return self._compute(x, denominator, y, Rounding.CEIL)


class EscalatingFixedPoint(_FixedPointBase):
    """Host contract: narrow attempt, one-step escalation, checked narrowing.

    Failures raise an `ArithmeticFault` that is never caught inside this package.
    """

    def _mul_div(self, x: int, y: int, z: int, rounding: Rounding) -> MulDivResult:
        return scaled_mul_div(x, y, z, self.int_type, rounding)

    def _compute(self, x: int, y: int, z: int, rounding: Rounding) -> int:
        result = self._validated_mul_div(x, y, z, rounding)
        if isinstance(result, MulDivFailure):
            logger.debug(f"{self.int_type} mul-div ({x}, {y}, {z}) faulted: {result.value}")
            raise fault_for(result, self.int_type.name)
        return result

    def fixed_mul_floor(self, x: int, y: int, denominator: int) -> int:
        return self._compute(x, y, denominator, Rounding.FLOOR)

    def fixed_mul_ceil(self, x: int, y: int, denominator: int) -> int:
        return self._compute(x, y, denominator, Rounding.CEIL)

    def fixed_div_floor(self, x: int, y: int, denominator: int) -> int:
        return self._compute(x, denominator, y, Rounding.FLOOR)

    def fixed_div_ceil(self, x: int, y: int, denominator: int) -> int:
        return self._compute(x, denominator, y, Rounding.CEIL)


class FixedPointFactory:
    """Factory for the shared, stateless contract instances of each integer tier."""

    _RECOVERABLE: ClassVar[dict[IntegerType, FixedPoint]] = {
        int_type: RecoverableFixedPoint(int_type) for int_type in INTEGER_TYPES
    }
    _HOST: ClassVar[dict[IntegerType, HostFixedPoint]] = {
        int_type: EscalatingFixedPoint(int_type) for int_type in INTEGER_TYPES
    }

    @classmethod
    def get_fixed_point(cls, int_type: IntegerType | str) -> FixedPoint:
        if isinstance(int_type, str):
            int_type = get_integer_type(int_type)
        return cls._RECOVERABLE[int_type]

    @classmethod
    def get_host_fixed_point(cls, int_type: IntegerType | str) -> HostFixedPoint:
        if isinstance(int_type, str):
            int_type = get_integer_type(int_type)
        return cls._HOST[int_type]


i64 = FixedPointFactory.get_fixed_point(INT64)
i128 = FixedPointFactory.get_fixed_point(INT128)
i256 = FixedPointFactory.get_fixed_point(INT256)
u64 = FixedPointFactory.get_fixed_point(UINT64)
u128 = FixedPointFactory.get_fixed_point(UINT128)
u256 = FixedPointFactory.get_fixed_point(UINT256)

host_i64 = FixedPointFactory.get_host_fixed_point(INT64)
host_i128 = FixedPointFactory.get_host_fixed_point(INT128)
host_i256 = FixedPointFactory.get_host_fixed_point(INT256)
host_u64 = FixedPointFactory.get_host_fixed_point(UINT64)
host_u128 = FixedPointFactory.get_host_fixed_point(UINT128)
host_u256 = FixedPointFactory.get_host_fixed_point(UINT256)
