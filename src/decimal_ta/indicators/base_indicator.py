"""
Shared pieces for decimal-ta indicators.

This module provides the ordered precondition checks every engine runs
before computing, the smoothing and seeding enums, and the guard that
turns adapter failures into IndicatorCalculationError.
"""

import logging
import numbers
from enum import Enum
from typing import Optional, Sequence

from decimal_ta.errors import (
    EmptyDataset, IndicatorCalculationError, NumericError, PeriodExceedsDataset,
    PeriodTooSmall, RsiDatasetTooSmall
)

logger = logging.getLogger(__name__)


class SmoothingMethod(Enum):
    """How RSI seeds its up/down averages."""
    SMA = "sma"
    EMA = "ema"
    WILDER = "wilder"

    @classmethod
    def parse(cls, value) -> 'SmoothingMethod':
        """Accept a member or its name in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value.lower())
        raise ValueError(f"Unknown smoothing method: {value!r}")


class EmaSeed(Enum):
    """Where the batch EMA recurrence starts."""
    SMA = "sma"
    FIRST_PRICE = "first_price"


def check_period(period) -> int:
    """Raise PeriodTooSmall unless ``period`` is an integer >= 1."""
    if isinstance(period, bool) or not isinstance(period, numbers.Integral):
        raise TypeError(f"Period must be an integer, got {type(period).__name__}")
    if period < 1:
        raise PeriodTooSmall(period)
    return int(period)


def validate_dataset(values: Sequence, period) -> int:
    """Guard clauses for window indicators, in order of precedence."""
    if len(values) < 1:
        raise EmptyDataset()
    period = check_period(period)
    if period > len(values):
        raise PeriodExceedsDataset(period, len(values))
    return period


def validate_movements(values: Sequence, period) -> int:
    """Guard clauses for indicators over consecutive price changes."""
    if len(values) < 2:
        raise RsiDatasetTooSmall()
    period = check_period(period)
    if period > len(values) - 1:
        raise PeriodExceedsDataset(period, len(values) - 1)
    return period


class CalculationGuard:
    """Context manager re-raising NumericError as IndicatorCalculationError.

    Batch loops set ``index`` before each step so the error records where
    the series broke.
    """

    def __init__(self, indicator: str):
        self.indicator = indicator
        self.index: Optional[int] = None

    def __enter__(self) -> 'CalculationGuard':
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None and issubclass(exc_type, NumericError):
            logger.debug(f"{self.indicator} calculation failed at index {self.index}: {exc}")
            raise IndicatorCalculationError(self.indicator, exc, self.index) from exc
        return False
