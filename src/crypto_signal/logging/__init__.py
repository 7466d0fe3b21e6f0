"""Structured logging."""

from crypto_signal.logging.setup import bound_request, get_logger, setup_logging

__all__ = ["bound_request", "get_logger", "setup_logging"]
