"""Short-horizon crypto price-direction signals."""

__version__ = "0.1.0"
