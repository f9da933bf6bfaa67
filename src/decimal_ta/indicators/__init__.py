"""
Indicators package for decimal-ta.

This package contains the technical indicators, each computed with exact
decimal arithmetic.
"""

from .base_indicator import EmaSeed, SmoothingMethod
from .moving_averages import sma, sma_series, ema, ema_series, ema_step
from .oscillators import RsiState, rsi, rsi_series, rsi_step
from .volume import VwapResult, vwap, vwap_series

__all__ = [
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
    "vwap_series"
]
