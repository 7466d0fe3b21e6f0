"""Market data providers — live exchange fetch or in-process simulation."""

from crypto_signal.market_data.base import MarketDataProvider
from crypto_signal.market_data.registry import PROVIDER_REGISTRY, build_provider, register

# Import provider modules so @register fires
from crypto_signal.market_data import live  # noqa: F401,E402
from crypto_signal.market_data import simulated  # noqa: F401,E402

__all__ = ["MarketDataProvider", "PROVIDER_REGISTRY", "build_provider", "register"]
