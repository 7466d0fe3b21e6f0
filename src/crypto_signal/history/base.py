"""History store abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod

from crypto_signal.models import Signal


class HistoryStore(ABC):
    """Append-only log of signals capped at ``capacity`` entries.

    Oldest entries are evicted first. Unreadable backing data reads as an
    empty history rather than an error.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self.capacity = capacity

    @abstractmethod
    def append(self, signal: Signal) -> Signal:
        """Stamp *signal* with the current time, store it, return the stored copy."""
        ...

    @abstractmethod
    def load_all(self) -> list[Signal]:
        """Return every stored signal, oldest first."""
        ...
