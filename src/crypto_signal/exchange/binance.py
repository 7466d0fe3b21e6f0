"""Binance public market-data client — REST only, no authentication."""

from __future__ import annotations

from typing import Any

import httpx

# Index of the close price inside a kline row.
KLINE_CLOSE = 4


class BinanceClient:
    """Async client for Binance's spot market-data endpoints."""

    def __init__(
        self,
        base_url: str = "https://api.binance.com/api/v3",
        timeout_s: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                timeout=self.timeout_s,
                transport=self._transport,
            )
        return self._http

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        http = await self._get_http()
        resp = await http.get(f"{self.base_url}{path}", params=params)
        resp.raise_for_status()
        return resp.json()

    async def get_ticker_24h(self, pair: str) -> dict:
        """Fetch rolling 24h statistics for a trading pair.

        Returns a dict with string-encoded numbers: lastPrice,
        priceChangePercent, quoteVolume, highPrice, lowPrice, ...
        """
        return await self._get("/ticker/24hr", {"symbol": pair})

    async def get_klines(self, pair: str, interval: str = "1h", limit: int = 24) -> list[list]:
        """Fetch the most recent candles, oldest first.

        Each row is [open_time, open, high, low, close, volume, close_time, ...].
        """
        return await self._get(
            "/klines",
            {"symbol": pair, "interval": interval, "limit": limit},
        )

    @staticmethod
    def pair(symbol: str, quote_asset: str = "USDT") -> str:
        """Build the exchange pair name, e.g. ("btc", "USDT") -> "BTCUSDT"."""
        return f"{symbol.upper()}{quote_asset.upper()}"

    @staticmethod
    def closes(klines: list[list]) -> list[float]:
        """Extract close prices from kline rows."""
        return [float(k[KLINE_CLOSE]) for k in klines]
