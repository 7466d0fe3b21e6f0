"""Flat-file history store — one JSON array, rewritten in full on append."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter

from crypto_signal.history.base import HistoryStore
from crypto_signal.logging import get_logger
from crypto_signal.models import Signal

log = get_logger(__name__)

_SIGNALS = TypeAdapter(list[Signal])


class JsonFileHistoryStore(HistoryStore):
    """History kept in a single JSON document.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace``, so readers never see a partial file. There is no
    locking: concurrent appends are last-writer-wins.
    """

    def __init__(self, path: str | Path, capacity: int = 100) -> None:
        super().__init__(capacity)
        self.path = Path(path)

    def load_all(self) -> list[Signal]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError:
            log.warning("history_unreadable", path=str(self.path), exc_info=True)
            return []

        try:
            return _SIGNALS.validate_json(raw)
        except ValueError:
            log.warning("history_corrupt", path=str(self.path))
            return []

    def append(self, signal: Signal) -> Signal:
        history = self.load_all()
        entry = signal.model_copy(update={"timestamp": datetime.now(timezone.utc)})
        history.append(entry)
        history = history[-self.capacity:]
        self._write(history)
        log.info("signal_recorded", symbol=entry.symbol, entries=len(history))
        return entry

    def _write(self, history: list[Signal]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = _SIGNALS.dump_json(history, indent=2, exclude_none=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
