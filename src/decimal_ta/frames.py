"""
pandas helpers for decimal-ta.

Converts OHLCV DataFrames into DataPoint lists and wraps indicator output
back into index-aligned pandas objects. Values stay Decimal (object
dtype) on the way out.
"""

import logging
import numbers
from typing import Any, List, Optional, Sequence

import pandas as pd

from decimal_ta import numeric
from decimal_ta.data_models import DataPoint
from decimal_ta.indicators.volume import VwapResult

logger = logging.getLogger(__name__)

OHLCV_COLUMNS = ('open', 'high', 'low', 'close', 'volume')
TIME_COLUMNS = ('timestamp', 'datetime')


def _volume(raw: Any) -> int:
    if isinstance(raw, numbers.Integral):
        return int(raw)
    if isinstance(raw, numbers.Real) and float(raw).is_integer():
        return int(raw)
    raise ValueError(f"Volume must be a whole number, got {raw!r}")


def data_points_from_frame(df: pd.DataFrame, instrument: Optional[str] = None,
                           granularity: Optional[str] = None) -> List[DataPoint]:
    """Build DataPoints from an OHLCV DataFrame, one per row in order.

    Columns are matched case-insensitively. ``instrument``, ``granularity``,
    ``complete`` and time columns are used when present. The time column is
    ``timestamp`` or ``datetime``; without one the timestamp comes from a
    DatetimeIndex.
    """
    frame = df.rename(columns=lambda c: str(c).lower())
    missing = [c for c in OHLCV_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Missing OHLCV columns: {missing}")

    time_column = next((c for c in TIME_COLUMNS if c in frame.columns), None)
    use_index_time = time_column is None and isinstance(frame.index, pd.DatetimeIndex)

    data_points = []
    for index, row in zip(frame.index, frame.to_dict('records')):
        timestamp = index if use_index_time else row.get(time_column)
        data_points.append(DataPoint(
            open=row['open'],
            high=row['high'],
            low=row['low'],
            close=row['close'],
            volume=_volume(row['volume']),
            instrument=row.get('instrument', instrument),
            granularity=row.get('granularity', granularity),
            timestamp=pd.Timestamp(timestamp).to_pydatetime() if timestamp is not None else None,
            complete=bool(row.get('complete', False))
        ))

    logger.debug(f"Converted {len(data_points)} rows to data points")
    return data_points


def price_series(df: pd.DataFrame, column: str = 'close') -> List:
    """Exact decimal prices from one DataFrame column, matched case-insensitively."""
    frame = df.rename(columns=lambda c: str(c).lower())
    return numeric.to_decimals(frame[column.lower()])


def to_series(values: Sequence, index: Optional[pd.Index] = None,
              name: Optional[str] = None) -> pd.Series:
    """Wrap indicator output in an object-dtype Series aligned with ``index``."""
    return pd.Series(list(values), index=index, name=name, dtype=object)


def vwap_frame(results: Sequence[VwapResult], index: Optional[pd.Index] = None) -> pd.DataFrame:
    """VWAP results as a DataFrame with one column per field."""
    return pd.DataFrame(
        {
            'value': [r.value for r in results],
            'cumulative_volume': [r.cumulative_volume for r in results],
            'cumulative_volume_price': [r.cumulative_volume_price for r in results]
        },
        index=index
    )
