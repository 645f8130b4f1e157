"""Rounding direction for mul-div operations."""

from enum import Enum


class Rounding(Enum):
    FLOOR = 0
    CEIL = 1
