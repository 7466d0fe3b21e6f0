"""Market data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# The engine reads a trailing window of this many closes.
MIN_HISTORY_POINTS = 6

# Prices are divisors in the indicators, so zero, NaN and inf are rejected.
Price = Annotated[float, Field(gt=0, allow_inf_nan=False)]
Finite = Annotated[float, Field(allow_inf_nan=False)]


class MarketSnapshot(BaseModel):
    """Point-in-time price/volume bundle for one symbol, passed to the engine."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    price: Price
    change_24h: Finite  # percent
    volume: Annotated[float, Field(ge=0, allow_inf_nan=False)]
    high_24h: Price
    low_24h: Price
    price_history: list[Price] = Field(min_length=MIN_HISTORY_POINTS)  # oldest first
