"""Signal model — emitted by the prediction engine, stored in history."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Direction = Literal["UP", "DOWN", "SIDEWAYS"]
Sentiment = Literal["BULLISH", "BEARISH", "NEUTRAL"]
Outcome = Literal["WIN", "LOSS"]


class PredictionHorizon(BaseModel):
    """Directional forecast for one timeframe."""

    direction: Direction
    probability: float = Field(ge=0.0, le=0.85)
    target_price: float
    stop_loss: float
    # 0.65 + 0.2 * r with r < 1 can still round up to exactly 0.85
    confidence: float = Field(ge=0.65, le=0.85)


class Signal(BaseModel):
    """Multi-horizon prediction for one symbol.

    ``timestamp`` is stamped when the signal is written to history.
    ``result`` is back-filled by an outside process once the outcome is known.
    """

    symbol: str
    predictions: dict[str, PredictionHorizon]
    market_sentiment: Sentiment
    key_factors: list[str] = Field(default_factory=list)
    generated_at: datetime
    timestamp: datetime | None = None
    result: Outcome | None = None
