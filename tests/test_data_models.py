"""
Tests for decimal-ta data models.

This module tests DataPoint normalization, validation and serialization.
"""

import dataclasses
import json
from datetime import datetime
from decimal import Decimal

import numpy as np
import pytest

from decimal_ta.data_models import DataPoint
from decimal_ta.errors import InvalidNumericFormat


class TestDataPoint:
    """Test cases for DataPoint class."""

    def test_defaults(self):
        """Test an empty data point is zeroed and incomplete."""
        point = DataPoint()

        assert point.open == Decimal(0)
        assert point.volume == 0
        assert point.complete is False
        assert point.instrument is None
        assert point.timestamp is None

    def test_price_normalization(self):
        """Test prices are stored as exact decimals."""
        point = DataPoint(open=1.1, high="1.25", low=1, close=Decimal("1.2"), volume=100)

        assert point.open == Decimal("1.1")
        assert point.high == Decimal("1.25")
        assert point.low == Decimal(1)
        assert all(isinstance(p, Decimal) for p in (point.open, point.high, point.low, point.close))

    def test_invalid_price(self):
        """Test non-numeric prices are rejected by the adapter."""
        with pytest.raises(InvalidNumericFormat):
            DataPoint(close="n/a")

    def test_volume_validation(self):
        """Test volume must be a non-negative integer."""
        with pytest.raises(ValueError, match="negative"):
            DataPoint(volume=-1)
        with pytest.raises(ValueError):
            DataPoint(volume=1.5)
        with pytest.raises(ValueError):
            DataPoint(volume=True)

    def test_numpy_integer_volume(self):
        """Test numpy integer volumes are accepted and stored as int."""
        point = DataPoint(volume=np.int64(10))

        assert point.volume == 10
        assert type(point.volume) is int
        assert json.loads(point.to_json())['volume'] == 10

    def test_from_dict_datetime_key(self):
        """Test from_dict reads the time from a datetime key."""
        point = DataPoint.from_dict({'close': "1.5", 'datetime': "2024-03-01T08:00:00"})

        assert point.timestamp == datetime(2024, 3, 1, 8, 0)

    def test_price_ordering_not_validated(self):
        """Test inconsistent high/low is left to the producer."""
        point = DataPoint(high=1, low=5, close=10, volume=1)

        assert point.high < point.low

    def test_typical_price(self):
        """Test (high + low + close) / 3."""
        point = DataPoint(high=8, low=4, close=6, volume=10)

        assert point.typical_price == Decimal(6)

    def test_frozen(self):
        """Test data points are immutable."""
        point = DataPoint(close=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            point.close = Decimal(2)

    def test_string_representation(self):
        """Test string representation."""
        point = DataPoint(open=1, high=2, low="0.5", close="1.5", volume=10, instrument="EURUSD")

        assert str(point) == "EURUSD O:1 H:2 L:0.5 C:1.5 V:10"

    def test_serialization(self):
        """Test dictionary and JSON round trips keep exact prices."""
        point = DataPoint(
            open="1.10010", high="1.10200", low="1.09950", close="1.10100", volume=1200,
            instrument="EURUSD", granularity="H4",
            timestamp=datetime(2024, 3, 1, 8, 0), complete=True
        )

        data = point.to_dict()
        assert data['close'] == "1.10100"
        assert data['timestamp'] == "2024-03-01T08:00:00"
        assert json.loads(point.to_json())['granularity'] == "H4"

        assert DataPoint.from_dict(data) == point
        assert DataPoint.from_json(point.to_json()) == point
