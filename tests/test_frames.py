"""
Tests for the pandas helpers.
"""

from datetime import datetime
from decimal import Decimal

import pandas as pd
import pytest

from decimal_ta.frames import data_points_from_frame, price_series, to_series, vwap_frame
from decimal_ta.indicators import ema_series, vwap_series


def make_frame():
    index = pd.date_range("2024-01-02 09:30", periods=3, freq="min")
    return pd.DataFrame(
        {
            'Open': [10.0, 10.5, 10.25],
            'High': [11.0, 10.75, 10.5],
            'Low': [9.5, 10.0, 10.0],
            'Close': [10.5, 10.25, 10.4],
            'Volume': [100, 250, 50]
        },
        index=index
    )


class TestDataPointsFromFrame:
    """Test cases for DataFrame conversion."""

    def test_rows_become_data_points(self):
        """Test each row maps to one DataPoint in order."""
        points = data_points_from_frame(make_frame(), instrument="SPY", granularity="M1")

        assert len(points) == 3
        assert points[0].high == Decimal("11.0")
        assert points[1].volume == 250
        assert points[2].close == Decimal("10.4")
        assert points[0].instrument == "SPY"
        assert points[0].granularity == "M1"

    def test_timestamp_from_index(self):
        """Test a DatetimeIndex supplies the timestamps."""
        points = data_points_from_frame(make_frame())

        assert points[0].timestamp == datetime(2024, 1, 2, 9, 30)
        assert points[2].timestamp == datetime(2024, 1, 2, 9, 32)

    def test_optional_columns(self):
        """Test per-row metadata columns override the arguments."""
        frame = make_frame().reset_index(drop=True)
        frame['instrument'] = ["A", "B", "C"]
        frame['complete'] = [True, True, False]

        points = data_points_from_frame(frame, instrument="IGNORED")

        assert [p.instrument for p in points] == ["A", "B", "C"]
        assert [p.complete for p in points] == [True, True, False]
        assert points[0].timestamp is None

    def test_datetime_column(self):
        """Test a datetime column supplies the timestamps without a DatetimeIndex."""
        frame = make_frame()
        frame.columns = [c.lower() for c in frame.columns]
        frame['datetime'] = frame.index
        frame = frame.reset_index(drop=True)

        points = data_points_from_frame(frame)

        assert points[0].timestamp == datetime(2024, 1, 2, 9, 30)
        assert points[2].timestamp == datetime(2024, 1, 2, 9, 32)

    def test_timestamp_column_preferred(self):
        """Test a timestamp column wins over the index and a datetime column."""
        frame = make_frame()
        frame['timestamp'] = pd.Timestamp("2023-06-01 12:00")
        frame['datetime'] = pd.Timestamp("2022-01-01")

        points = data_points_from_frame(frame)

        assert points[0].timestamp == datetime(2023, 6, 1, 12, 0)

    def test_float_volume(self):
        """Test whole-number float volumes are accepted and fractional ones rejected."""
        frame = make_frame()
        frame['Volume'] = [100.0, 250.0, 50.0]
        assert data_points_from_frame(frame)[0].volume == 100

        frame['Volume'] = [100.5, 250.0, 50.0]
        with pytest.raises(ValueError):
            data_points_from_frame(frame)

    def test_missing_columns(self):
        """Test a frame without OHLCV columns is rejected."""
        with pytest.raises(ValueError, match="volume"):
            data_points_from_frame(make_frame().drop(columns=['Volume']))

    def test_vwap_over_frame(self):
        """Test the converted points feed the VWAP fold."""
        frame = make_frame()
        results = vwap_series(data_points_from_frame(frame))
        result_frame = vwap_frame(results, index=frame.index)

        assert list(result_frame.columns) == ['value', 'cumulative_volume', 'cumulative_volume_price']
        assert list(result_frame['cumulative_volume']) == [100, 350, 400]
        assert result_frame['value'].iloc[0] == Decimal("10.33333333333333333333333333")


class TestSeriesHelpers:
    """Test cases for price extraction and output wrapping."""

    def test_price_series(self):
        """Test a column converts to exact decimals."""
        assert price_series(make_frame()) == [Decimal("10.5"), Decimal("10.25"), Decimal("10.4")]
        assert price_series(make_frame(), 'Open')[1] == Decimal("10.5")

    def test_indicator_accepts_pandas_series(self):
        """Test a pandas Series can be passed straight to an indicator."""
        frame = make_frame()

        assert ema_series(frame['Close'], 2) == ema_series([10.5, 10.25, 10.4], 2)

    def test_to_series_alignment(self):
        """Test output is wrapped with the input index and object dtype."""
        frame = make_frame()
        values = ema_series(frame['Close'], 2)

        series = to_series(values, index=frame.index, name="ema_2")

        assert series.dtype == object
        assert series.name == "ema_2"
        assert list(series.index) == list(frame.index)
        assert series.iloc[-1] == values[-1]
