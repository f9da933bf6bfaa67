"""
Volume indicators for decimal-ta.

This module provides the Volume-Weighted Average Price. Each step returns
the cumulative totals alongside the value; pass them back in to extend
the running average with the next data point.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List

from decimal_ta import numeric
from decimal_ta.data_models import DataPoint
from decimal_ta.errors import EmptyDataset
from decimal_ta.indicators.base_indicator import CalculationGuard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VwapResult:
    """
    Represents a volume weighted average price.

    Attributes:
        value: The volume weighted average price
        cumulative_volume: Previous volume plus the current volume
        cumulative_volume_price: Previous volume price plus the current volume price
    """
    value: Decimal
    cumulative_volume: int
    cumulative_volume_price: Decimal

    @classmethod
    def initial(cls) -> 'VwapResult':
        """Zero state to start a new session from."""
        return cls(value=numeric.ZERO, cumulative_volume=0, cumulative_volume_price=numeric.ZERO)

    def next(self, data_point: DataPoint) -> 'VwapResult':
        """VWAP after adding ``data_point`` to these totals."""
        return vwap(data_point, self.cumulative_volume, self.cumulative_volume_price)


def vwap(data_point: DataPoint, cumulative_volume: int = 0,
         cumulative_volume_price: Any = numeric.ZERO) -> VwapResult:
    """Calculate a volume weighted average price.

    Both cumulative values are zero for the first data point of a session.

    Raises:
        DivisionByZero: if the cumulative volume is still zero
        InvalidNumericFormat: if ``cumulative_volume_price`` is not numeric
    """
    volume_price = numeric.multiply(data_point.typical_price, numeric.to_decimal(data_point.volume))

    new_cumulative_volume = cumulative_volume + data_point.volume
    new_cumulative_volume_price = numeric.add(numeric.to_decimal(cumulative_volume_price), volume_price)

    value = numeric.divide(new_cumulative_volume_price, numeric.to_decimal(new_cumulative_volume))

    return VwapResult(
        value=value,
        cumulative_volume=new_cumulative_volume,
        cumulative_volume_price=new_cumulative_volume_price
    )


def vwap_series(data_points: Iterable[DataPoint]) -> List[VwapResult]:
    """VWAP for every data point, starting from zero cumulative state.

    Raises:
        EmptyDataset: if there are no data points
        IndicatorCalculationError: if any step fails, e.g. zero leading volume
    """
    points = list(data_points)
    if not points:
        raise EmptyDataset()

    results: List[VwapResult] = []
    state = VwapResult.initial()
    with CalculationGuard("VWAP") as guard:
        for i, data_point in enumerate(points):
            guard.index = i
            state = state.next(data_point)
            results.append(state)

    logger.debug(f"Calculated VWAP over {len(points)} data points")
    return results
