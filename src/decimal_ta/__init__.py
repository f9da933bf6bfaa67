"""
decimal-ta: technical analysis indicators with exact decimal arithmetic.

SMA, EMA, RSI and VWAP over price and OHLCV series. Every calculation
uses ``decimal.Decimal`` so long chains of smoothing steps do not pick
up binary floating-point error.
"""

__version__ = "0.1.0"
__author__ = "decimal-ta Team"

from .config import Config
from .data_models import DataPoint
from .errors import (
    IndicatorError, ValidationError, EmptyDataset, RsiDatasetTooSmall,
    PeriodTooSmall, PeriodExceedsDataset, NumericError, InvalidNumericFormat,
    DivisionByZero, IndicatorCalculationError
)
from .indicators import (
    EmaSeed, SmoothingMethod, sma, sma_series, ema, ema_series, ema_step,
    RsiState, rsi, rsi_series, rsi_step, VwapResult, vwap, vwap_series
)
from .results import Result, capture

__all__ = [
    "Config",
    "DataPoint",
    "IndicatorError",
    "ValidationError",
    "EmptyDataset",
    "RsiDatasetTooSmall",
    "PeriodTooSmall",
    "PeriodExceedsDataset",
    "NumericError",
    "InvalidNumericFormat",
    "DivisionByZero",
    "IndicatorCalculationError",
    "EmaSeed",
    "SmoothingMethod",
    "sma",
    "sma_series",
    "ema",
    "ema_series",
    "ema_step",
    "RsiState",
    "rsi",
    "rsi_series",
    "rsi_step",
    "VwapResult",
    "vwap",
    "vwap_series",
    "Result",
    "capture"
]
