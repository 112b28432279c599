from __future__ import annotations

from enum import Enum


class AnimalType(str, Enum):
    """Source of the milk a salary entry pays for."""

    COW = "cow"
    BUFFALO = "buffalo"


class SalaryPeriod(str, Enum):
    """Ten-day windows of the current month used by the salary screens."""

    FIRST = "1-10"
    SECOND = "11-20"
    THIRD = "21-end"
    ALL = "all"


class CreditDateRange(str, Enum):
    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    TEN_DAYS = "10days"
