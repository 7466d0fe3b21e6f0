"""Rule-based prediction engine."""

from crypto_signal.prediction.engine import TIMEFRAME_MOVES, PredictionEngine
from crypto_signal.prediction.indicators import (
    classify_momentum,
    classify_sentiment,
    recent_change,
    relative_volatility,
)

__all__ = [
    "PredictionEngine",
    "TIMEFRAME_MOVES",
    "classify_momentum",
    "classify_sentiment",
    "recent_change",
    "relative_volatility",
]
