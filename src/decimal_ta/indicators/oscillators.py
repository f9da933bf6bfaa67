"""
Oscillator indicators for decimal-ta.

This module provides the Relative Strength Index. Up and down movements
are averaged with a seed over the first ``period`` movements (SMA or EMA)
followed by Wilder's recurrence ``(avg * (period - 1) + move) / period``.
The batch functions are folds of the same step a streaming caller uses.
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Tuple

from decimal_ta import numeric
from decimal_ta.indicators.base_indicator import (
    CalculationGuard, SmoothingMethod, check_period, validate_movements
)
from decimal_ta.indicators.moving_averages import ema_next, weighted_multiplier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RsiState:
    """
    Snapshot threaded between RSI steps.

    ``up_sum`` and ``down_sum`` are cumulative totals of every movement
    seen. The averages are None until the first movement (EMA seeding) or
    until ``period`` movements (SMA and Wilder seeding).
    """
    period: int
    smoothing: SmoothingMethod = SmoothingMethod.WILDER
    previous_price: Optional[Decimal] = None
    count: int = 0
    up_sum: Decimal = numeric.ZERO
    down_sum: Decimal = numeric.ZERO
    up_average: Optional[Decimal] = None
    down_average: Optional[Decimal] = None

    def __post_init__(self):
        """Validate the period and normalize the smoothing method."""
        object.__setattr__(self, "period", check_period(self.period))
        object.__setattr__(self, "smoothing", SmoothingMethod.parse(self.smoothing))

    @classmethod
    def initial(cls, period: int, smoothing=SmoothingMethod.WILDER) -> 'RsiState':
        """Empty state for a new stream."""
        return cls(period=period, smoothing=smoothing)

    @property
    def ready(self) -> bool:
        """Whether enough movements have been seen to produce a value."""
        return self.count >= self.period

    @property
    def value(self) -> Optional[Decimal]:
        """RSI for the current averages, or None during warm-up."""
        if not self.ready:
            return None
        return relative_strength_index(self.up_average, self.down_average)


def relative_strength_index(up_average: Decimal, down_average: Decimal) -> Decimal:
    """100 - 100 / (1 + up/down); 100 when there was no downward movement."""
    if numeric.is_zero(down_average):
        return numeric.HUNDRED
    relative_strength = numeric.divide(up_average, down_average)
    return numeric.subtract(
        numeric.HUNDRED,
        numeric.divide(numeric.HUNDRED, numeric.add(numeric.ONE, relative_strength))
    )


def _wilder(previous_average: Decimal, movement: Decimal, period: int) -> Decimal:
    weighted = numeric.multiply(previous_average, numeric.to_decimal(period - 1))
    return numeric.divide(numeric.add(weighted, movement), numeric.to_decimal(period))


def _seed(state: RsiState, up: Decimal, down: Decimal, count: int,
          up_sum: Decimal, down_sum: Decimal) -> Tuple[Optional[Decimal], Optional[Decimal]]:
    """Averages during the first ``period`` movements."""
    if state.smoothing is SmoothingMethod.EMA:
        if state.up_average is None:
            return up, down
        multiplier = weighted_multiplier(state.period)
        return (ema_next(up, multiplier, state.up_average),
                ema_next(down, multiplier, state.down_average))

    if count < state.period:
        return None, None
    period = numeric.to_decimal(state.period)
    return numeric.divide(up_sum, period), numeric.divide(down_sum, period)


def _advance(state: RsiState, price: Any) -> RsiState:
    price = numeric.to_decimal(price)
    if state.previous_price is None:
        return replace(state, previous_price=price)

    change = numeric.subtract(price, state.previous_price)
    up = numeric.maximum(change, numeric.ZERO)
    down = numeric.maximum(numeric.subtract(numeric.ZERO, change), numeric.ZERO)

    count = state.count + 1
    up_sum = numeric.add(state.up_sum, up)
    down_sum = numeric.add(state.down_sum, down)

    if count <= state.period:
        up_average, down_average = _seed(state, up, down, count, up_sum, down_sum)
    else:
        up_average = _wilder(state.up_average, up, state.period)
        down_average = _wilder(state.down_average, down, state.period)

    return replace(
        state,
        previous_price=price,
        count=count,
        up_sum=up_sum,
        down_sum=down_sum,
        up_average=up_average,
        down_average=down_average
    )


def rsi_step(state: RsiState, price: Any) -> Tuple[Optional[Decimal], RsiState]:
    """Consume one price. Returns (rsi | None, new_state).

    The value is None until ``state.period`` movements have been seen.

    Raises:
        IndicatorCalculationError: if ``price`` is not numeric
    """
    with CalculationGuard("RSI"):
        state = _advance(state, price)
        return state.value, state


def rsi_series(series: Iterable[Any], period: Optional[int] = None,
               smoothing=SmoothingMethod.WILDER) -> List[Decimal]:
    """RSI for every index of the series.

    Positions before ``period`` are zero so the output zips with the input.

    Args:
        series: Prices, oldest first (at least two)
        period (Optional[int]): Number of movements averaged; defaults to
            ``len(series) - 1``
        smoothing: SmoothingMethod or its name

    Raises:
        RsiDatasetTooSmall, PeriodTooSmall, PeriodExceedsDataset: on invalid input
        IndicatorCalculationError: if a price is not numeric
    """
    values = list(series)
    if period is None:
        period = len(values) - 1
    period = validate_movements(values, period)
    state = RsiState.initial(period, smoothing)

    result: List[Decimal] = []
    with CalculationGuard("RSI") as guard:
        for i, price in enumerate(values):
            guard.index = i
            state = _advance(state, price)
            value = state.value
            result.append(numeric.ZERO if value is None else value)

    logger.debug(f"Calculated RSI({period}, {state.smoothing.value}) over {len(values)} prices")
    return result


def rsi(series: Iterable[Any], period: Optional[int] = None,
        smoothing=SmoothingMethod.WILDER) -> Decimal:
    """Final RSI value of the series. See ``rsi_series`` for arguments."""
    return rsi_series(series, period, smoothing)[-1]
