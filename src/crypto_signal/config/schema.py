"""Pydantic models describing config.yaml and its defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

SUPPORTED_TIMEFRAMES = ("30m", "1h", "24h")

DEFAULT_DISCLAIMER = (
    "Predictions are generated by simple rules with random jitter. "
    "They are not financial advice."
)


class MarketDataConfig(BaseModel):
    base_url: str = "https://api.binance.com/api/v3"
    quote_asset: str = "USDT"
    kline_interval: str = "1h"
    kline_limit: int = Field(default=24, ge=6)
    timeout_s: float = 15.0


class PredictionConfig(BaseModel):
    timeframes: list[str] = Field(default_factory=lambda: list(SUPPORTED_TIMEFRAMES))
    confidence_threshold: float = 0.70
    model: str = "MiniMax-M2.1"
    fallback: str = "rule-based"
    disclaimer: str = DEFAULT_DISCLAIMER

    @field_validator("timeframes")
    @classmethod
    def _known_timeframes(cls, value: list[str]) -> list[str]:
        unknown = [tf for tf in value if tf not in SUPPORTED_TIMEFRAMES]
        if unknown:
            raise ValueError(f"unsupported timeframes: {unknown}")
        return value


class StorageConfig(BaseModel):
    path: str = "/tmp/signal_history.json"
    capacity: int = Field(default=100, gt=0)
    history_limit: int = Field(default=20, gt=0)
    # Off by default: predict responses are not written to history.
    record_predictions: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel):
    symbols: list[str] = Field(default_factory=lambda: ["BTC", "ETH", "SOL"])
    simulation_mode: bool = False
    market_data: MarketDataConfig = Field(default_factory=MarketDataConfig)
    prediction: PredictionConfig = Field(default_factory=PredictionConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @property
    def mode(self) -> str:
        return "simulation" if self.simulation_mode else "live"
