__all__ = (
    "MAX_INT64",
    "MAX_INT128",
    "MAX_INT256",
    "MAX_UINT64",
    "MAX_UINT128",
    "MAX_UINT256",
    "MIN_INT64",
    "MIN_INT128",
    "MIN_INT256",
    "MIN_UINT64",
    "MIN_UINT128",
    "MIN_UINT256",
    "STROOP",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


def _min_int(bits: int) -> int:
    return typing.cast("int", -(2 ** (bits - 1)))


def _max_int(bits: int) -> int:
    return typing.cast("int", (2 ** (bits - 1)) - 1)


MIN_INT64 = _min_int(64)
MAX_INT64 = _max_int(64)

MIN_INT128 = _min_int(128)
MAX_INT128 = _max_int(128)

MIN_INT256 = _min_int(256)
MAX_INT256 = _max_int(256)

MIN_UINT64 = _min_uint(64)
MAX_UINT64 = _max_uint(64)

MIN_UINT128 = _min_uint(128)
MAX_UINT128 = _max_uint(128)

MIN_UINT256 = _min_uint(256)
MAX_UINT256 = _max_uint(256)

# Smallest indivisible unit ratio used by callers (7 decimal places)
STROOP = 10_000_000
