"""Pydantic domain models."""

from crypto_signal.models.market import MarketSnapshot
from crypto_signal.models.signal import (
    Direction,
    Outcome,
    PredictionHorizon,
    Sentiment,
    Signal,
)

__all__ = [
    "Direction",
    "MarketSnapshot",
    "Outcome",
    "PredictionHorizon",
    "Sentiment",
    "Signal",
]
