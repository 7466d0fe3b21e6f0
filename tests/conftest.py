"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import cycle

import pytest

from crypto_signal.config import AppConfig
from crypto_signal.history import JsonFileHistoryStore
from crypto_signal.models import MarketSnapshot, PredictionHorizon, Signal

NOW = datetime.now(timezone.utc)


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values: list[float]) -> None:
        self._values = cycle(values)

    def random(self) -> float:
        return next(self._values)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def make_snapshot():
    """Factory for MarketSnapshot with sensible defaults."""

    def _make(
        history: list[float] | None = None,
        price: float = 100.0,
        change_24h: float = 0.0,
        symbol: str = "BTC",
    ) -> MarketSnapshot:
        return MarketSnapshot(
            symbol=symbol,
            price=price,
            change_24h=change_24h,
            volume=1_000_000.0,
            high_24h=price * 1.02,
            low_24h=price * 0.98,
            price_history=history if history is not None else [100.0] * 24,
        )

    return _make


@pytest.fixture
def make_signal():
    """Factory for a minimal stored Signal."""

    def _make(symbol: str = "BTC", result: str | None = None) -> Signal:
        return Signal(
            symbol=symbol,
            predictions={
                "1h": PredictionHorizon(
                    direction="UP",
                    probability=0.6,
                    target_price=101.0,
                    stop_loss=98.0,
                    confidence=0.7,
                ),
            },
            market_sentiment="NEUTRAL",
            key_factors=["Recent momentum: NEUTRAL"],
            generated_at=NOW,
            result=result,
        )

    return _make


@pytest.fixture
def history_path(tmp_path):
    return tmp_path / "signal_history.json"


@pytest.fixture
def history_store(history_path):
    return JsonFileHistoryStore(history_path, capacity=100)


@pytest.fixture
def sim_config(history_path) -> AppConfig:
    return AppConfig(simulation_mode=True, storage={"path": str(history_path)})
