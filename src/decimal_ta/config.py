"""
Configuration management for decimal-ta.

This module handles loading and validating the settings that control
decimal precision, rounding and logging.
"""

import decimal
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ROUNDING_MODES = (
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP,
)

SMOOTHING_METHODS = ("sma", "ema", "wilder")


@dataclass
class Config:
    """Configuration class for decimal-ta."""

    # Decimal arithmetic
    precision: int = 28
    rounding: str = decimal.ROUND_HALF_UP

    # Logging
    log_level: str = "INFO"

    # RSI defaults for callers
    rsi_period: int = 14
    rsi_smoothing: str = "wilder"

    def __post_init__(self):
        """Load configuration from environment variables."""
        self.precision = self._env_int("DECIMAL_TA_PRECISION", self.precision)
        self.rounding = os.getenv("DECIMAL_TA_ROUNDING", self.rounding).upper()
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        self.rsi_period = self._env_int("DECIMAL_TA_RSI_PERIOD", self.rsi_period)
        self.rsi_smoothing = os.getenv("DECIMAL_TA_RSI_SMOOTHING", self.rsi_smoothing).lower()

        logger.info(f"Configuration loaded: precision={self.precision}, rounding={self.rounding}")

    @staticmethod
    def _env_int(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
            return default

    def validate(self) -> bool:
        """Validate the configuration."""
        valid = True

        if self.precision < 1:
            logger.error("Decimal precision must be at least 1")
            valid = False

        if self.rounding not in ROUNDING_MODES:
            logger.error(f"Unknown rounding mode: {self.rounding}")
            valid = False

        if self.rsi_period < 1:
            logger.error("RSI period must be at least 1")
            valid = False

        if self.rsi_smoothing not in SMOOTHING_METHODS:
            logger.error(f"Unknown RSI smoothing method: {self.rsi_smoothing}")
            valid = False

        return valid

    def decimal_context(self) -> decimal.Context:
        """Build the decimal context used for all indicator arithmetic."""
        return decimal.Context(prec=self.precision, rounding=self.rounding)

    def apply_logging(self):
        """Set the level of the package logger."""
        logging.getLogger("decimal_ta").setLevel(self.log_level.upper())
