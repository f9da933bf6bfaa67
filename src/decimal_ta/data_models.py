"""
Data models for decimal-ta.

This module provides the OHLCV data point consumed by the volume
indicators, along with JSON serialization helpers.
"""

import json
import logging
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from decimal_ta import numeric

logger = logging.getLogger(__name__)


class JSONSerializable(ABC):
    """Abstract base class for JSON serializable objects."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for JSON serialization."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create object from dictionary."""
        pass

    def to_json(self) -> str:
        """Convert object to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    @classmethod
    def from_json(cls, json_str: str):
        """Create object from JSON string."""
        data = json.loads(json_str)
        return cls.from_dict(data)


@dataclass(frozen=True)
class DataPoint(JSONSerializable):
    """
    One OHLCV observation of an instrument.

    Prices are normalized to exact decimals on construction. A data point
    is incomplete while the interval given by ``granularity`` (e.g.
    ``"H4"``) has not yet elapsed, so its values are not final.

    The price ordering ``high >= low`` and ``low <= close <= high`` is
    left to the producer and is not checked here.
    """
    open: Decimal = numeric.ZERO
    high: Decimal = numeric.ZERO
    low: Decimal = numeric.ZERO
    close: Decimal = numeric.ZERO
    volume: int = 0
    instrument: Optional[str] = None
    granularity: Optional[str] = None
    timestamp: Optional[datetime] = None
    complete: bool = False

    def __post_init__(self):
        """Normalize prices and validate volume."""
        for name in ("open", "high", "low", "close"):
            object.__setattr__(self, name, numeric.to_decimal(getattr(self, name)))

        if isinstance(self.volume, bool) or not isinstance(self.volume, numbers.Integral):
            raise ValueError("Volume must be an integer")
        object.__setattr__(self, "volume", int(self.volume))
        if self.volume < 0:
            raise ValueError("Volume cannot be negative")

    @property
    def typical_price(self) -> Decimal:
        """(high + low + close) / 3."""
        total = numeric.add(numeric.add(self.high, self.low), self.close)
        return numeric.divide(total, numeric.THREE)

    def __str__(self) -> str:
        """String representation."""
        label = self.instrument or "?"
        return f"{label} O:{self.open} H:{self.high} L:{self.low} C:{self.close} V:{self.volume}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'open': str(self.open),
            'high': str(self.high),
            'low': str(self.low),
            'close': str(self.close),
            'volume': self.volume,
            'instrument': self.instrument,
            'granularity': self.granularity,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'complete': self.complete
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DataPoint':
        """Create DataPoint from dictionary."""
        timestamp = data.get('timestamp', data.get('datetime'))
        return cls(
            open=data.get('open', numeric.ZERO),
            high=data.get('high', numeric.ZERO),
            low=data.get('low', numeric.ZERO),
            close=data.get('close', numeric.ZERO),
            volume=data.get('volume', 0),
            instrument=data.get('instrument'),
            granularity=data.get('granularity'),
            timestamp=datetime.fromisoformat(timestamp) if timestamp else None,
            complete=data.get('complete', False)
        )
