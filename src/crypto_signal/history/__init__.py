"""Bounded signal history."""

from crypto_signal.history.base import HistoryStore
from crypto_signal.history.json_store import JsonFileHistoryStore

__all__ = ["HistoryStore", "JsonFileHistoryStore"]
