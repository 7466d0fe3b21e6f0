"""Simulated provider — random-walk prices around fixed per-symbol anchors.

Nothing here touches the network, and no seed is kept between calls unless
a seeded random source is injected.
"""

from __future__ import annotations

from crypto_signal.market_data.base import MarketDataProvider
from crypto_signal.market_data.registry import register
from crypto_signal.models import MarketSnapshot
from crypto_signal.rng import uniform

# symbol -> (base price, +/- jitter)
BASE_PRICES: dict[str, tuple[float, float]] = {
    "BTC": (67000.0, 1500.0),
    "ETH": (3500.0, 120.0),
    "SOL": (150.0, 8.0),
}
DEFAULT_BASE = (100.0, 5.0)

HISTORY_POINTS = 24
HISTORY_ANCHOR = 0.98  # walk starts at 98% of base
STEP_PCT = 0.01
CHANGE_24H_RANGE = (-5.0, 5.0)
VOLUME_RANGE = (1e8, 5e9)
HIGH_LOW_BAND = 0.02


@register
class SimulatedMarketDataProvider(MarketDataProvider):
    """Generate a fresh synthetic snapshot on every call."""

    name = "simulated"

    async def fetch_snapshot(self, symbol: str) -> MarketSnapshot | None:
        return self.generate(symbol)

    def generate(self, symbol: str) -> MarketSnapshot:
        base, jitter = BASE_PRICES.get(symbol.upper(), DEFAULT_BASE)
        price = base + uniform(self.rng, -jitter, jitter)

        history: list[float] = []
        point = base * HISTORY_ANCHOR
        for _ in range(HISTORY_POINTS):
            point *= 1 + uniform(self.rng, -STEP_PCT, STEP_PCT)
            history.append(point)

        return MarketSnapshot(
            symbol=symbol,
            price=price,
            change_24h=uniform(self.rng, *CHANGE_24H_RANGE),
            volume=uniform(self.rng, *VOLUME_RANGE),
            high_24h=price * (1 + HIGH_LOW_BAND),
            low_24h=price * (1 - HIGH_LOW_BAND),
            price_history=history,
        )
