"""Request dispatcher — maps the ``action`` parameter to an operation."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any

from crypto_signal.config.schema import AppConfig
from crypto_signal.history import HistoryStore
from crypto_signal.logging import get_logger
from crypto_signal.market_data import MarketDataProvider
from crypto_signal.metrics import calculate_win_rate
from crypto_signal.models import Signal
from crypto_signal.prediction import PredictionEngine

log = get_logger(__name__)

ACTIONS = ("predict", "history", "status")
DEFAULT_ACTION = "predict"

_PROCESS_STARTED = time.monotonic()


class InvalidActionError(ValueError):
    """Raised for an ``action`` outside ACTIONS."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Invalid action: {action!r}")
        self.action = action


def uptime_seconds() -> float:
    return time.monotonic() - _PROCESS_STARTED


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _dump(signal: Signal) -> dict[str, Any]:
    return signal.model_dump(mode="json", exclude_none=True)


class SignalService:
    """The three operations behind ``GET /api/signal``."""

    def __init__(
        self,
        config: AppConfig,
        provider: MarketDataProvider,
        engine: PredictionEngine,
        store: HistoryStore,
    ) -> None:
        self.config = config
        self.provider = provider
        self.engine = engine
        self.store = store

    async def dispatch(self, action: str | None) -> dict[str, Any]:
        action = action or DEFAULT_ACTION
        if action == "predict":
            return await self.predict()
        if action == "history":
            return self.history()
        if action == "status":
            return self.status()
        raise InvalidActionError(action)

    async def predict(self) -> dict[str, Any]:
        """Predict every configured symbol; symbols without data are skipped."""
        results: dict[str, Signal] = {}
        for symbol in self.config.symbols:
            snapshot = await self.provider.fetch_snapshot(symbol)
            if snapshot is None:
                continue
            signal = self.engine.predict(symbol, snapshot)
            results[symbol] = signal
            log.info(
                "prediction_generated",
                symbol=symbol,
                sentiment=signal.market_sentiment,
                directions={tf: h.direction for tf, h in signal.predictions.items()},
            )

        if self.config.storage.record_predictions:
            for signal in results.values():
                self.store.append(signal)

        prediction_cfg = self.config.prediction
        return {
            "success": True,
            "timestamp": _now_iso(),
            "mode": self.config.mode,
            "predictions": {symbol: _dump(s) for symbol, s in results.items()},
            "metadata": {
                "confidence_threshold": prediction_cfg.confidence_threshold,
                "model": prediction_cfg.model,
                "fallback": prediction_cfg.fallback,
                "disclaimer": prediction_cfg.disclaimer,
            },
        }

    def history(self) -> dict[str, Any]:
        """Most recent entries plus the win-rate summary."""
        entries = self.store.load_all()
        limit = self.config.storage.history_limit
        return {
            "success": True,
            "history": [_dump(s) for s in entries[-limit:]],
            "win_rate": calculate_win_rate(entries).to_dict(),
        }

    def status(self) -> dict[str, Any]:
        entries = self.store.load_all()
        return {
            "success": True,
            "status": "active",
            "uptime": uptime_seconds(),
            "win_rate": calculate_win_rate(entries).to_dict(),
            "total_signals": len(entries),
        }
