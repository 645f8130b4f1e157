import dataclasses
from typing import Any

from pydantic import TypeAdapter

from fixed_point_math.constants import (
    MAX_INT64,
    MAX_INT128,
    MAX_INT256,
    MAX_UINT64,
    MAX_UINT128,
    MAX_UINT256,
    MIN_INT64,
    MIN_INT128,
    MIN_INT256,
    MIN_UINT64,
    MIN_UINT128,
    MIN_UINT256,
)
from fixed_point_math.exceptions import FixedPointValueError
from fixed_point_math.validation.integer_values import (
    ValidatedInt64,
    ValidatedInt128,
    ValidatedInt256,
    ValidatedUint64,
    ValidatedUint128,
    ValidatedUint256,
)


@dataclasses.dataclass(slots=True, frozen=True)
class IntegerType:
    """
    A fixed-width integer tier.

    Tiers form a chain ordered by width; every tier except the last has a `wider` tier that can
    losslessly hold any value of this tier and any product of two of them.
    """

    name: str
    bits: int
    signed: bool
    min_value: int
    max_value: int
    annotation: Any = dataclasses.field(repr=False, compare=False)
    wider: "IntegerType | None" = dataclasses.field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        return self.name

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def validate(self, value: int) -> int:
        """
        Check that the value is a strict `int` within the bounds of this tier.

        Raises `pydantic.ValidationError` otherwise.
        """
        return _adapter(self.annotation).validate_python(value)


_ADAPTERS: dict[Any, TypeAdapter[int]] = {}


def _adapter(annotation: Any) -> TypeAdapter[int]:
    try:
        return _ADAPTERS[annotation]
    except KeyError:
        adapter = _ADAPTERS[annotation] = TypeAdapter(annotation)
        return adapter


INT256 = IntegerType(
    name="int256",
    bits=256,
    signed=True,
    min_value=MIN_INT256,
    max_value=MAX_INT256,
    annotation=ValidatedInt256,
)
INT128 = IntegerType(
    name="int128",
    bits=128,
    signed=True,
    min_value=MIN_INT128,
    max_value=MAX_INT128,
    annotation=ValidatedInt128,
    wider=INT256,
)
INT64 = IntegerType(
    name="int64",
    bits=64,
    signed=True,
    min_value=MIN_INT64,
    max_value=MAX_INT64,
    annotation=ValidatedInt64,
    wider=INT128,
)

UINT256 = IntegerType(
    name="uint256",
    bits=256,
    signed=False,
    min_value=MIN_UINT256,
    max_value=MAX_UINT256,
    annotation=ValidatedUint256,
)
UINT128 = IntegerType(
    name="uint128",
    bits=128,
    signed=False,
    min_value=MIN_UINT128,
    max_value=MAX_UINT128,
    annotation=ValidatedUint128,
    wider=UINT256,
)
UINT64 = IntegerType(
    name="uint64",
    bits=64,
    signed=False,
    min_value=MIN_UINT64,
    max_value=MAX_UINT64,
    annotation=ValidatedUint64,
    wider=UINT128,
)

INTEGER_TYPES: tuple[IntegerType, ...] = (INT64, INT128, INT256, UINT64, UINT128, UINT256)

_ALIASES: dict[str, IntegerType] = {}
for _int_type in INTEGER_TYPES:
    _prefix = "i" if _int_type.signed else "u"
    _ALIASES[_int_type.name] = _int_type
    _ALIASES[f"{_prefix}{_int_type.bits}"] = _int_type


def get_integer_type(name: str) -> IntegerType:
    """
    Resolve a tier by name, e.g. "i128", "int128", "u256" or "uint256".
    """

    try:
        return _ALIASES[name.lower()]
    except KeyError:
        msg = f"Unknown integer type {name!r}. Valid choices: {', '.join(sorted(_ALIASES))}"
        raise FixedPointValueError(msg) from None
