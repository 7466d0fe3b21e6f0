"""Registry of market data providers, keyed by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crypto_signal.config.schema import AppConfig
    from crypto_signal.market_data.base import MarketDataProvider
    from crypto_signal.rng import RandomSource

PROVIDER_REGISTRY: dict[str, type[MarketDataProvider]] = {}


def register(cls: type[MarketDataProvider]) -> type[MarketDataProvider]:
    """Class decorator that adds a provider to the global registry."""
    if not hasattr(cls, "name") or not cls.name:
        raise ValueError(f"Provider class {cls.__name__} must define a 'name' attribute")
    if cls.name in PROVIDER_REGISTRY:
        raise ValueError(f"Duplicate provider name: {cls.name!r}")
    PROVIDER_REGISTRY[cls.name] = cls
    return cls


def build_provider(config: AppConfig, rng: RandomSource | None = None) -> MarketDataProvider:
    """Instantiate the provider selected by ``config.simulation_mode``."""
    name = "simulated" if config.simulation_mode else "live"
    cls = PROVIDER_REGISTRY.get(name)
    if cls is None:
        raise ValueError(f"No market data provider registered as {name!r}")
    return cls(config, rng=rng)
