"""Market data provider abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod

from crypto_signal.config.schema import AppConfig
from crypto_signal.models import MarketSnapshot
from crypto_signal.rng import RandomSource, default_rng


class MarketDataProvider(ABC):
    """Source of per-symbol market snapshots.

    Subclasses set ``name`` and implement fetch_snapshot().
    """

    name: str

    def __init__(self, config: AppConfig, rng: RandomSource | None = None) -> None:
        self.config = config
        self.rng = rng or default_rng()

    @abstractmethod
    async def fetch_snapshot(self, symbol: str) -> MarketSnapshot | None:
        """Return a fresh snapshot for *symbol*, or None if it can't be built."""
        ...

    async def close(self) -> None:
        """Release resources held across requests; called at app shutdown."""
        return None
