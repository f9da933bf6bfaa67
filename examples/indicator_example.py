"""
Indicator Example for decimal-ta.

This example demonstrates batch indicators over a closing-price series
and the streaming pattern where the caller threads state between calls.
"""

import logging
from datetime import datetime, timedelta

from decimal_ta import (
    Config, DataPoint, IndicatorError, RsiState, capture, ema, ema_series,
    ema_step, rsi, rsi_step, sma, vwap, vwap_series
)
from decimal_ta import numeric

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CLOSES = [
    "44.34", "44.09", "44.15", "43.61", "44.33", "44.83", "45.10", "45.42",
    "45.84", "46.08", "45.89", "46.03", "45.61", "46.28", "46.28", "46.00",
    "46.03", "46.41", "46.22", "45.64"
]


def demonstrate_batch(config: Config):
    """Batch indicators over the whole series."""
    print("Batch indicators")

    print(f"  SMA(5):  {sma(CLOSES, 5)}")
    print(f"  EMA(10): {ema(CLOSES, 10)}")
    print(f"  RSI({config.rsi_period}, {config.rsi_smoothing}): "
          f"{rsi(CLOSES, config.rsi_period, config.rsi_smoothing)}")

    result = capture(sma, [])
    print(f"  SMA of empty series ok={result.ok}: {result.error}")


def demonstrate_streaming(config: Config):
    """Feed prices one at a time, keeping only the returned state."""
    print("\nStreaming indicators")

    period = 10
    previous_ema = ema_series(CLOSES[:period], period)[-1]
    for price in CLOSES[period:]:
        previous_ema = ema_step(price, period, previous_ema)
    print(f"  Streamed EMA({period}): {previous_ema}")

    state = RsiState.initial(config.rsi_period, config.rsi_smoothing)
    value = None
    for price in CLOSES:
        value, state = rsi_step(state, price)
    print(f"  Streamed RSI({config.rsi_period}): {value}")


def demonstrate_vwap():
    """Session VWAP over a few one-minute bars."""
    print("\nVWAP")

    start = datetime(2024, 1, 2, 9, 30)
    bars = [
        DataPoint(open=o, high=h, low=l, close=c, volume=v, instrument="SPY",
                  granularity="M1", timestamp=start + timedelta(minutes=i), complete=True)
        for i, (o, h, l, c, v) in enumerate([
            ("470.10", "470.50", "469.80", "470.30", 1200),
            ("470.30", "470.90", "470.20", "470.85", 800),
            ("470.85", "471.00", "470.40", "470.45", 1500),
        ])
    ]

    for bar, result in zip(bars, vwap_series(bars)):
        print(f"  {bar.timestamp:%H:%M} VWAP={result.value} cumulative_volume={result.cumulative_volume}")

    try:
        vwap(DataPoint(high=1, low=1, close=1, volume=0))
    except IndicatorError as e:
        print(f"  Zero volume: {e}")


def main():
    """Run the indicator examples."""
    config = Config()
    if not config.validate():
        logger.error("Invalid configuration, aborting")
        return

    config.apply_logging()
    numeric.configure(config)

    demonstrate_batch(config)
    demonstrate_streaming(config)
    demonstrate_vwap()


if __name__ == "__main__":
    main()
