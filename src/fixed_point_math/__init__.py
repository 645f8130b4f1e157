from .config import settings
from .constants import STROOP
from .logging import logger
from .version import __version__

# isort: split

from .exceptions import (
    ArithmeticFault,
    DivisionByZero,
    FixedPointError,
    IntermediateOverflow,
    ResultOverflow,
)
from .fixed_point import (
    EscalatingFixedPoint,
    FixedPoint,
    FixedPointFactory,
    HostFixedPoint,
    RecoverableFixedPoint,
    host_i64,
    host_i128,
    host_i256,
    host_u64,
    host_u128,
    host_u256,
    i64,
    i128,
    i256,
    u64,
    u128,
    u256,
)
from .rounding import Rounding
from .types import INT64, INT128, INT256, UINT64, UINT128, UINT256, IntegerType, get_integer_type

__all__ = (
    "INT64",
    "INT128",
    "INT256",
    "STROOP",
    "UINT64",
    "UINT128",
    "UINT256",
    "ArithmeticFault",
    "DivisionByZero",
    "EscalatingFixedPoint",
    "FixedPoint",
    "FixedPointError",
    "FixedPointFactory",
    "HostFixedPoint",
    "IntegerType",
    "IntermediateOverflow",
    "RecoverableFixedPoint",
    "ResultOverflow",
    "Rounding",
    "__version__",
    "get_integer_type",
    "host_i64",
    "host_i128",
    "host_i256",
    "host_u64",
    "host_u128",
    "host_u256",
    "i64",
    "i128",
    "i256",
    "logger",
    "settings",
    "u64",
    "u128",
    "u256",
)
