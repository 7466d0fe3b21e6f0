"""Prediction engine — momentum-following directional calls per timeframe."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from crypto_signal.config.schema import SUPPORTED_TIMEFRAMES
from crypto_signal.models import MarketSnapshot, PredictionHorizon, Signal
from crypto_signal.prediction.indicators import (
    Momentum,
    classify_momentum,
    classify_sentiment,
    relative_volatility,
)
from crypto_signal.rng import RandomSource, default_rng

# timeframe -> fractional move applied to price for the target
TIMEFRAME_MOVES: dict[str, float] = {
    "30m": 0.005,
    "1h": 0.01,
    "24h": 0.03,
}

# stop-loss multipliers: fixed 2% band regardless of timeframe
STOP_LOSS_LONG = 0.98
STOP_LOSS_SHORT = 1.02
SUPPORT_PCT = 0.05
MAX_PROBABILITY = 0.85
TREND_PROBABILITY = (0.55, 0.10)  # base, spread
COIN_FLIP_PROBABILITY = (0.50, 0.05)
CONFIDENCE = (0.65, 0.20)


class PredictionEngine:
    """Turn a MarketSnapshot into a Signal.

    All randomness is drawn from *rng* so tests can script it.
    """

    def __init__(
        self,
        timeframes: Sequence[str] = SUPPORTED_TIMEFRAMES,
        rng: RandomSource | None = None,
    ) -> None:
        unknown = [tf for tf in timeframes if tf not in TIMEFRAME_MOVES]
        if unknown:
            raise ValueError(f"unsupported timeframes: {unknown}")
        self.timeframes = list(timeframes)
        self.rng = rng or default_rng()

    def predict(self, symbol: str, snapshot: MarketSnapshot) -> Signal:
        price = snapshot.price
        momentum = classify_momentum(snapshot.price_history)
        volatility = relative_volatility(snapshot.price_history, price)

        predictions = {
            tf: self._horizon(price, momentum, TIMEFRAME_MOVES[tf])
            for tf in self.timeframes
        }

        return Signal(
            symbol=symbol,
            predictions=predictions,
            market_sentiment=classify_sentiment(snapshot.change_24h),
            key_factors=self._key_factors(price, momentum, volatility),
            generated_at=datetime.now(timezone.utc),
        )

    def _horizon(self, price: float, momentum: Momentum, move: float) -> PredictionHorizon:
        if momentum == "STRONG_UP":
            direction = "UP"
            probability = TREND_PROBABILITY[0] + self.rng.random() * TREND_PROBABILITY[1]
        elif momentum == "STRONG_DOWN":
            direction = "DOWN"
            probability = TREND_PROBABILITY[0] + self.rng.random() * TREND_PROBABILITY[1]
        else:
            direction = "UP" if self.rng.random() > 0.5 else "DOWN"
            probability = COIN_FLIP_PROBABILITY[0] + self.rng.random() * COIN_FLIP_PROBABILITY[1]

        if direction == "UP":
            target = price * (1 + move)
            stop_loss = price * STOP_LOSS_LONG
        else:
            target = price * (1 - move)
            stop_loss = price * STOP_LOSS_SHORT

        return PredictionHorizon(
            direction=direction,
            probability=min(probability, MAX_PROBABILITY),
            target_price=round(target, 2),
            stop_loss=round(stop_loss, 2),
            confidence=CONFIDENCE[0] + self.rng.random() * CONFIDENCE[1],
        )

    @staticmethod
    def _key_factors(price: float, momentum: Momentum, volatility: float) -> list[str]:
        return [
            f"Volatility: {volatility * 100:.2f}%",
            f"Recent momentum: {momentum}",
            f"Support: ${price * (1 - SUPPORT_PCT):,.2f}",
            f"Resistance: ${price * (1 + SUPPORT_PCT):,.2f}",
        ]
