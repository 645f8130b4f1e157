from typing import Annotated

from pydantic import Field

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

type ValidatedInt64 = Annotated[int, Field(strict=True, ge=MIN_INT64, le=MAX_INT64)]
type ValidatedInt128 = Annotated[int, Field(strict=True, ge=MIN_INT128, le=MAX_INT128)]
type ValidatedInt256 = Annotated[int, Field(strict=True, ge=MIN_INT256, le=MAX_INT256)]

type ValidatedUint64 = Annotated[int, Field(strict=True, ge=MIN_UINT64, le=MAX_UINT64)]
type ValidatedUint128 = Annotated[int, Field(strict=True, ge=MIN_UINT128, le=MAX_UINT128)]
type ValidatedUint256 = Annotated[int, Field(strict=True, ge=MIN_UINT256, le=MAX_UINT256)]
