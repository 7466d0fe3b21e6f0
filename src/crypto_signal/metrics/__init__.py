"""Signal statistics."""

from crypto_signal.metrics.formulas import (
    WinRate,
    calculate_win_rate,
    population_std,
    win_rate,
)

__all__ = [
    "WinRate",
    "calculate_win_rate",
    "population_std",
    "win_rate",
]
