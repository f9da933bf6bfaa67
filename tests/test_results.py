"""
Tests for Result and capture.
"""

from decimal import Decimal

import pytest

from decimal_ta.errors import EmptyDataset, IndicatorCalculationError
from decimal_ta.indicators import ema, sma
from decimal_ta.results import Result, capture


class TestResult:
    """Test cases for the discriminated result."""

    def test_capture_success(self):
        """Test a successful call yields an ok result."""
        result = capture(sma, [1, 2, 3], 2)

        assert result.ok
        assert result.value == Decimal("2.5")
        assert result.unwrap() == Decimal("2.5")

    def test_capture_failure(self):
        """Test an indicator error is folded into the result."""
        result = capture(sma, [])

        assert not result.ok
        assert isinstance(result.error, EmptyDataset)
        with pytest.raises(EmptyDataset):
            result.unwrap()

    def test_capture_keyword_arguments(self):
        """Test keyword arguments are forwarded."""
        result = capture(ema, ["a", 1], period=2)

        assert isinstance(result.error, IndicatorCalculationError)

    def test_other_exceptions_propagate(self):
        """Test errors outside the taxonomy are not captured."""
        with pytest.raises(TypeError):
            capture(sma, [1, 2], "2")

    def test_constructors(self):
        """Test explicit success and failure constructors."""
        assert Result.success(1) == Result(value=1)
        error = EmptyDataset()
        assert Result.failure(error).error is error
