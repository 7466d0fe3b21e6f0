"""Pure metric computation functions — no I/O."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Sequence

import numpy as np


@dataclass
class WinRate:
    """Outcome summary over a signal history.

    ``rate`` is a one-decimal percentage string when any outcome has been
    recorded, else the integer 0.
    """

    total: int = 0
    wins: int = 0
    rate: str | int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def population_std(values: Sequence[float]) -> float:
    """Population standard deviation (ddof=0)."""
    if len(values) == 0:
        return 0.0
    arr = np.array(values, dtype=np.float64)
    return float(np.std(arr))


def win_rate(wins: int, total: int) -> float:
    """Win rate as a percentage 0-100."""
    if total <= 0:
        return 0.0
    return wins / total * 100


def calculate_win_rate(history: Iterable[Any]) -> WinRate:
    """Summarise outcomes of entries that carry a ``result``.

    Entries without a result (not yet scored) are ignored.
    """
    total = 0
    wins = 0
    for entry in history:
        result = getattr(entry, "result", None)
        if not result:
            continue
        total += 1
        if result == "WIN":
            wins += 1

    if total == 0:
        return WinRate(total=0, wins=wins, rate=0)
    return WinRate(total=total, wins=wins, rate=f"{win_rate(wins, total):.1f}")
