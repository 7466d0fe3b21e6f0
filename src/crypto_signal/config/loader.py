"""Load AppConfig from YAML with CRYPTO_SIGNAL_* environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from crypto_signal.config.schema import AppConfig

_TRUTHY = {"1", "true", "yes", "on"}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        CRYPTO_SIGNAL_SIMULATION    -> simulation_mode
        CRYPTO_SIGNAL_STORAGE_PATH  -> storage.path
        CRYPTO_SIGNAL_LOG_LEVEL     -> logging.level
        CRYPTO_SIGNAL_LOG_FORMAT    -> logging.format
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    simulation = os.environ.get("CRYPTO_SIGNAL_SIMULATION")
    if simulation:
        data["simulation_mode"] = simulation.strip().lower() in _TRUTHY

    storage_path = os.environ.get("CRYPTO_SIGNAL_STORAGE_PATH")
    if storage_path:
        data.setdefault("storage", {})["path"] = storage_path

    log_level = os.environ.get("CRYPTO_SIGNAL_LOG_LEVEL")
    if log_level:
        data.setdefault("logging", {})["level"] = log_level

    log_format = os.environ.get("CRYPTO_SIGNAL_LOG_FORMAT")
    if log_format:
        data.setdefault("logging", {})["format"] = log_format

    return AppConfig.model_validate(data)
