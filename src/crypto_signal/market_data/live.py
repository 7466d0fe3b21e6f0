"""Live provider — 24h ticker + hourly klines from Binance."""

from __future__ import annotations

import asyncio

import httpx

from crypto_signal.config.schema import AppConfig
from crypto_signal.exchange.binance import BinanceClient
from crypto_signal.logging import get_logger
from crypto_signal.market_data.base import MarketDataProvider
from crypto_signal.market_data.registry import register
from crypto_signal.models import MarketSnapshot
from crypto_signal.rng import RandomSource

log = get_logger(__name__)

# Upstream failures that drop a symbol instead of failing the request.
# pydantic's ValidationError is a ValueError.
FETCH_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError, IndexError)


@register
class LiveMarketDataProvider(MarketDataProvider):
    """Fetch ticker statistics and candles concurrently, no retries."""

    name = "live"

    def __init__(
        self,
        config: AppConfig,
        rng: RandomSource | None = None,
        client: BinanceClient | None = None,
    ) -> None:
        super().__init__(config, rng=rng)
        md = config.market_data
        self.client = client or BinanceClient(base_url=md.base_url, timeout_s=md.timeout_s)

    async def fetch_snapshot(self, symbol: str) -> MarketSnapshot | None:
        md = self.config.market_data
        pair = BinanceClient.pair(symbol, md.quote_asset)
        try:
            ticker, klines = await asyncio.gather(
                self.client.get_ticker_24h(pair),
                self.client.get_klines(pair, interval=md.kline_interval, limit=md.kline_limit),
            )
            snapshot = MarketSnapshot(
                symbol=symbol,
                price=float(ticker["lastPrice"]),
                change_24h=float(ticker["priceChangePercent"]),
                volume=float(ticker["quoteVolume"]),
                high_24h=float(ticker["highPrice"]),
                low_24h=float(ticker["lowPrice"]),
                price_history=BinanceClient.closes(klines),
            )
        except FETCH_ERRORS:
            log.exception("snapshot_fetch_failed", symbol=symbol, pair=pair)
            return None

        log.debug("snapshot_fetched", symbol=symbol, price=snapshot.price)
        return snapshot

    async def close(self) -> None:
        await self.client.close()
