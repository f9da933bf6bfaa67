"""
Moving average indicators for decimal-ta.

This module provides simple and exponential moving averages over exact
decimal series, in batch form and as a single incremental EMA step.
"""

import logging
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from decimal_ta import numeric
from decimal_ta.indicators.base_indicator import (
    CalculationGuard, EmaSeed, check_period, validate_dataset
)

logger = logging.getLogger(__name__)


def sma(series: Iterable[Any], period: Optional[int] = None) -> Decimal:
    """Simple Moving Average of the last ``period`` elements.

    Args:
        series: Prices, oldest first
        period (Optional[int]): Window size; defaults to the series length

    Returns:
        Decimal: The exact mean of the window

    Raises:
        EmptyDataset, PeriodTooSmall, PeriodExceedsDataset: on invalid input
        InvalidNumericFormat: if a price in the window is not numeric
    """
    values = list(series)
    if period is None:
        period = len(values)
    period = validate_dataset(values, period)

    total = numeric.ZERO
    for price in numeric.to_decimals(values[-period:]):
        total = numeric.exact_add(total, price)

    return numeric.divide(total, numeric.to_decimal(period))


def sma_series(series: Iterable[Any], period: int) -> List[Decimal]:
    """Rolling SMA aligned with the input; positions before ``period - 1`` are zero."""
    values = list(series)
    period = validate_dataset(values, period)
    prices = numeric.to_decimals(values)
    divisor = numeric.to_decimal(period)

    result: List[Decimal] = []
    total = numeric.ZERO
    for i, price in enumerate(prices):
        total = numeric.exact_add(total, price)
        if i >= period:
            total = numeric.exact_subtract(total, prices[i - period])
        result.append(numeric.divide(total, divisor) if i >= period - 1 else numeric.ZERO)

    logger.debug(f"Calculated SMA({period}) over {len(prices)} prices")
    return result


def weighted_multiplier(period: int) -> Decimal:
    """EMA smoothing factor 2 / (period + 1)."""
    return numeric.divide(numeric.TWO, numeric.to_decimal(period + 1))


def ema_next(price: Decimal, multiplier: Decimal, previous_ema: Decimal) -> Decimal:
    """price * multiplier + previous_ema * (1 - multiplier)."""
    carried = numeric.multiply(previous_ema, numeric.subtract(numeric.ONE, multiplier))
    return numeric.add(numeric.multiply(price, multiplier), carried)


def ema_step(price: Any, period: int, previous_ema: Any) -> Decimal:
    """Advance an EMA by one price.

    Streaming callers keep the returned value and pass it back as
    ``previous_ema`` with the next price.

    Raises:
        PeriodTooSmall: if ``period`` < 1
        IndicatorCalculationError: if either value is not numeric
    """
    period = check_period(period)
    with CalculationGuard("EMA"):
        return ema_next(
            numeric.to_decimal(price),
            weighted_multiplier(period),
            numeric.to_decimal(previous_ema)
        )


def ema(series: Iterable[Any], period: Optional[int] = None,
        seed: EmaSeed = EmaSeed.SMA) -> Decimal:
    """Exponential Moving Average of a series.

    With ``EmaSeed.SMA`` the recurrence starts from the SMA of the first
    ``period`` prices and runs over the rest of the series, so the result
    equals ``ema_series(series, period)[-1]``. With
    ``EmaSeed.FIRST_PRICE`` only the last ``period`` prices are used and
    the first of them is the seed.

    Args:
        series: Prices, oldest first
        period (Optional[int]): Smoothing period; defaults to the series length
        seed (EmaSeed): Seeding convention

    Returns:
        Decimal: The final EMA value
    """
    values = list(series)
    if period is None:
        period = len(values)
    period = validate_dataset(values, period)
    seed = EmaSeed(seed)

    if seed is EmaSeed.SMA:
        return ema_series(values, period)[-1]

    start = len(values) - period
    with CalculationGuard("EMA") as guard:
        guard.index = start
        value = numeric.to_decimal(values[start])
        multiplier = weighted_multiplier(period)
        for i in range(start + 1, len(values)):
            guard.index = i
            value = ema_next(numeric.to_decimal(values[i]), multiplier, value)

    return value


def ema_series(series: Iterable[Any], period: int) -> List[Decimal]:
    """EMA for every index of the series, SMA-seeded.

    Positions before ``period - 1`` are zero so the output zips with the
    input; index ``period - 1`` holds the SMA seed.
    """
    values = list(series)
    period = validate_dataset(values, period)

    with CalculationGuard("EMA") as guard:
        prices = []
        for i, value in enumerate(values):
            guard.index = i
            prices.append(numeric.to_decimal(value))

        guard.index = period - 1
        seed = sma(prices[:period], period)
        multiplier = weighted_multiplier(period)

        result = [numeric.ZERO] * (period - 1) + [seed]
        for i in range(period, len(prices)):
            guard.index = i
            result.append(ema_next(prices[i], multiplier, result[-1]))

    logger.debug(f"Calculated EMA({period}) over {len(prices)} prices")
    return result
