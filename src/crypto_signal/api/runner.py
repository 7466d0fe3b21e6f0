#!/usr/bin/env python3
"""FastAPI server runner."""

import os

import uvicorn

from crypto_signal.api.app import app, config
from crypto_signal.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Run the FastAPI server."""
    setup_logging(level=config.logging.level, log_format=config.logging.format)

    port = int(os.getenv("PORT", str(config.server.port)))
    logger.info(
        "Starting FastAPI server",
        host=config.server.host,
        port=port,
        mode=config.mode,
    )

    try:
        uvicorn.run(
            app,
            host=config.server.host,
            port=port,
            log_config=None  # Use our structlog setup
        )
    except Exception as e:
        logger.error("Failed to start server", error=str(e))
        raise


if __name__ == "__main__":
    main()
