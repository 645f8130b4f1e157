import pytest

from fixed_point_math import DivisionByZero, ResultOverflow, host_u128, u128
from fixed_point_math.constants import MAX_UINT128

NEAR_MAX = 340_282_366_920_938_463_463


def test_fixed_mul_floor_rounds_down():
    assert u128.fixed_mul_floor(1_5391283, 314_1592653, 1_0000001) == 483_5313675


def test_fixed_mul_floor_large_number():
    assert u128.fixed_mul_floor(NEAR_MAX, 10**18, 10**18) == NEAR_MAX


def test_fixed_mul_floor_phantom_overflow():
    assert u128.fixed_mul_floor(NEAR_MAX, 10**18 + 1, 10**18) is None


def test_fixed_mul_ceil_rounds_up():
    assert u128.fixed_mul_ceil(1_5391283, 314_1592653, 1_0000001) == 483_5313676


def test_fixed_mul_ceil_large_number():
    assert u128.fixed_mul_ceil(NEAR_MAX, 10**18, 10**18) == NEAR_MAX


def test_fixed_mul_ceil_phantom_overflow():
    assert u128.fixed_mul_ceil(NEAR_MAX, 10**18 + 1, 10**18) is None


def test_fixed_div_floor_rounds_down():
    assert u128.fixed_div_floor(314_1592653, 1_5391280, 1_0000000) == 204_1150997


def test_fixed_div_floor_large_number():
    assert u128.fixed_div_floor(NEAR_MAX, 10**18, 10**18) == NEAR_MAX


def test_fixed_div_floor_phantom_overflow():
    assert u128.fixed_div_floor(NEAR_MAX, 10**18, 10**18 + 1) is None


def test_fixed_div_ceil_rounds_up():
    assert u128.fixed_div_ceil(314_1592653, 1_5391280, 1_0000000) == 204_1150998


def test_fixed_div_ceil_large_number():
    assert u128.fixed_div_ceil(NEAR_MAX, 10**18, 10**18) == NEAR_MAX


def test_fixed_div_ceil_phantom_overflow():
    assert u128.fixed_div_ceil(NEAR_MAX, 10**18, 10**18 + 1) is None


def test_zero_denominator():
    assert u128.fixed_mul_floor(1, 1, 0) is None
    assert u128.fixed_div_ceil(1, 0, 1) is None


def test_host_fixed_mul_floor_rounds_down():
    assert host_u128.fixed_mul_floor(1_5391283, 314_1592653, 1_0000001) == 483_5313675


def test_host_fixed_mul_floor_phantom_overflow_scales():
    assert host_u128.fixed_mul_floor(NEAR_MAX, 10**27, 10**18) == NEAR_MAX * 10**9


def test_host_fixed_mul_ceil_rounds_up():
    assert host_u128.fixed_mul_ceil(1_5391283, 314_1592653, 1_0000001) == 483_5313676


def test_host_fixed_mul_ceil_large_number():
    assert host_u128.fixed_mul_ceil(NEAR_MAX, 10**18, 10**18) == NEAR_MAX


def test_host_fixed_mul_ceil_phantom_overflow_scales():
    assert host_u128.fixed_mul_ceil(NEAR_MAX, 10**27, 10**18) == NEAR_MAX * 10**9


def test_host_fixed_div_floor_rounds_down():
    assert host_u128.fixed_div_floor(314_1592653, 1_5391280, 1_0000000) == 204_1150997


def test_host_fixed_div_floor_phantom_overflow_scales():
    assert host_u128.fixed_div_floor(NEAR_MAX, 10**18, 10**27) == NEAR_MAX * 10**9


def test_host_fixed_div_ceil_rounds_up():
    assert host_u128.fixed_div_ceil(314_1592653, 1_5391280, 1_0000000) == 204_1150998


def test_host_fixed_div_ceil_large_number():
    assert host_u128.fixed_div_ceil(NEAR_MAX, 10**18, 10**18) == NEAR_MAX


def test_host_fixed_div_ceil_phantom_overflow_scales():
    assert host_u128.fixed_div_ceil(NEAR_MAX, 10**18, 10**27) == NEAR_MAX * 10**9


def test_host_result_overflow():
    with pytest.raises(ResultOverflow):
        host_u128.fixed_mul_floor(MAX_UINT128, MAX_UINT128, 1)


def test_host_zero_denominator():
    with pytest.raises(DivisionByZero):
        host_u128.fixed_mul_ceil(MAX_UINT128, MAX_UINT128, 0)
