"""FastAPI application for the signal endpoint."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crypto_signal import __version__
from crypto_signal.api.service import InvalidActionError, SignalService
from crypto_signal.config.loader import load_config
from crypto_signal.config.schema import AppConfig
from crypto_signal.history import HistoryStore, JsonFileHistoryStore
from crypto_signal.logging import bound_request, get_logger
from crypto_signal.market_data import MarketDataProvider, build_provider
from crypto_signal.prediction import PredictionEngine

logger = get_logger(__name__)


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def create_app(
    config: AppConfig,
    provider: MarketDataProvider | None = None,
    engine: PredictionEngine | None = None,
    store: HistoryStore | None = None,
) -> FastAPI:
    """Build the app; collaborators default to what *config* describes."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Requests share one provider; its client is closed only at shutdown.
        await app.state.service.provider.close()
        logger.info("provider_closed", provider=app.state.service.provider.name)

    app = FastAPI(
        title="Crypto Signal API",
        description="Short-horizon price-direction predictions for crypto symbols",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.service = SignalService(
        config=config,
        provider=provider or build_provider(config),
        engine=engine or PredictionEngine(timeframes=config.prediction.timeframes),
        store=store or JsonFileHistoryStore(config.storage.path, capacity=config.storage.capacity),
    )

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/api/signal")
    async def signal(request: Request, action: Optional[str] = None):
        """Run ``predict`` (default), ``history`` or ``status``."""
        service: SignalService = request.app.state.service
        with bound_request(action=action or "predict"):
            try:
                return await service.dispatch(action)
            except InvalidActionError:
                logger.warning("invalid_action")
                return _error_response(400, "Invalid action")
            except Exception as e:
                logger.exception("request_failed")
                return _error_response(500, str(e))

    return app


# Config path comes from the environment; a missing file means defaults.
config = load_config(os.environ.get("CRYPTO_SIGNAL_CONFIG"))
app = create_app(config)
