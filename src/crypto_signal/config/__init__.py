"""Configuration system."""

from crypto_signal.config.loader import load_config
from crypto_signal.config.schema import AppConfig

__all__ = ["AppConfig", "load_config"]
