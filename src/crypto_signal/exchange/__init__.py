"""Exchange API clients."""

from crypto_signal.exchange.binance import BinanceClient

__all__ = ["BinanceClient"]
