"""
Tests for configuration module.
"""

import decimal
import logging
import os
from unittest.mock import patch

from decimal_ta.config import Config


class TestConfig:
    """Test cases for Config class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = Config()

        assert config.precision == 28
        assert config.rounding == decimal.ROUND_HALF_UP
        assert config.log_level == "INFO"
        assert config.rsi_period == 14
        assert config.rsi_smoothing == "wilder"

    @patch.dict(os.environ, {
        'DECIMAL_TA_PRECISION': '40',
        'DECIMAL_TA_ROUNDING': 'round_half_even',
        'DECIMAL_TA_RSI_PERIOD': '9',
        'DECIMAL_TA_RSI_SMOOTHING': 'EMA',
        'LOG_LEVEL': 'DEBUG'
    })
    def test_environment_loading(self):
        """Test loading configuration from environment variables."""
        config = Config()

        assert config.precision == 40
        assert config.rounding == decimal.ROUND_HALF_EVEN
        assert config.rsi_period == 9
        assert config.rsi_smoothing == 'ema'
        assert config.log_level == 'DEBUG'

    @patch.dict(os.environ, {'DECIMAL_TA_PRECISION': 'lots'})
    def test_non_integer_environment_value_falls_back(self):
        """Test that an unparsable integer override keeps the default."""
        config = Config()

        assert config.precision == 28

    def test_validation_with_valid_config(self):
        """Test configuration validation with valid settings."""
        config = Config()

        assert config.validate() is True

    def test_validation_with_invalid_settings(self):
        """Test configuration validation rejects each bad field."""
        config = Config()
        config.precision = 0
        assert config.validate() is False

        config = Config()
        config.rounding = "ROUND_SIDEWAYS"
        assert config.validate() is False

        config = Config()
        config.rsi_period = 0
        assert config.validate() is False

        config = Config()
        config.rsi_smoothing = "hull"
        assert config.validate() is False

    def test_decimal_context(self):
        """Test the decimal context reflects precision and rounding."""
        config = Config()
        config.precision = 6
        config.rounding = decimal.ROUND_DOWN

        context = config.decimal_context()

        assert context.prec == 6
        assert context.rounding == decimal.ROUND_DOWN
        assert context.divide(2, 3) == decimal.Decimal("0.666666")

    def test_apply_logging(self):
        """Test the package logger level follows log_level."""
        config = Config()
        config.log_level = "debug"
        logger = logging.getLogger("decimal_ta")
        original = logger.level
        try:
            config.apply_logging()
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(original)
