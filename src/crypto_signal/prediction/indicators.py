"""Pure functions on price series."""

from __future__ import annotations

from typing import Literal, Sequence

from crypto_signal.metrics.formulas import population_std
from crypto_signal.models.signal import Sentiment

Momentum = Literal["STRONG_UP", "STRONG_DOWN", "NEUTRAL"]

MOMENTUM_LOOKBACK = 6
MOMENTUM_THRESHOLD = 0.01
SENTIMENT_THRESHOLD_PCT = 2.0


def recent_change(history: Sequence[float], lookback: int = MOMENTUM_LOOKBACK) -> float:
    """Fractional change from ``history[-lookback]`` to the last close."""
    if len(history) < lookback:
        raise ValueError(f"need at least {lookback} prices, got {len(history)}")
    start = history[-lookback]
    return (history[-1] - start) / start


def classify_momentum(history: Sequence[float]) -> Momentum:
    """STRONG_UP above +1%, STRONG_DOWN below -1%, NEUTRAL otherwise."""
    change = recent_change(history)
    if change > MOMENTUM_THRESHOLD:
        return "STRONG_UP"
    if change < -MOMENTUM_THRESHOLD:
        return "STRONG_DOWN"
    return "NEUTRAL"


def relative_volatility(
    history: Sequence[float],
    price: float,
    window: int = MOMENTUM_LOOKBACK,
) -> float:
    """Population stdev of the trailing *window* closes, as a fraction of *price*."""
    return population_std(list(history[-window:])) / price


def classify_sentiment(change_24h: float) -> Sentiment:
    """Coarse market mood from the 24h percent change."""
    if change_24h > SENTIMENT_THRESHOLD_PCT:
        return "BULLISH"
    if change_24h < -SENTIMENT_THRESHOLD_PCT:
        return "BEARISH"
    return "NEUTRAL"
