"""Tests for the HTTP surface — dispatcher actions and error mapping."""

from __future__ import annotations

import asyncio
import random

import httpx
import pytest
from fastapi.testclient import TestClient

from crypto_signal.api.app import create_app
from crypto_signal.api.service import SignalService
from crypto_signal.config import AppConfig
from crypto_signal.exchange import BinanceClient
from crypto_signal.market_data.base import MarketDataProvider
from crypto_signal.market_data.live import LiveMarketDataProvider
from crypto_signal.market_data.simulated import SimulatedMarketDataProvider
from crypto_signal.prediction import PredictionEngine


class _PartialProvider(MarketDataProvider):
    """Simulated data for every symbol except the ones listed as down."""

    name = "partial"

    def __init__(self, config: AppConfig, down: set[str]) -> None:
        super().__init__(config)
        self.down = down
        self.closed = 0
        self._sim = SimulatedMarketDataProvider(config, rng=random.Random(0))

    async def fetch_snapshot(self, symbol):
        if symbol in self.down:
            return None
        return self._sim.generate(symbol)

    async def close(self) -> None:
        self.closed += 1


def _ticker(price: str = "64250.10") -> dict:
    return {
        "lastPrice": price,
        "priceChangePercent": "1.5",
        "quoteVolume": "1834567890.12",
        "highPrice": "65800.00",
        "lowPrice": "63900.50",
    }


def _klines() -> list[list]:
    return [[0, "0", "0", "0", str(64000.0 + i * 10)] for i in range(24)]


class _SlowUpstream(httpx.AsyncBaseTransport):
    """Binance stand-in that answers after *delay* and fails once closed."""

    def __init__(self, delay: float = 0.0, prices: dict[str, str] | None = None) -> None:
        self.delay = delay
        self.prices = prices or {}
        self.closed = False

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(self.delay)
        if self.closed:
            raise httpx.ReadError("connection closed", request=request)
        if request.url.path.endswith("/klines"):
            return httpx.Response(200, json=_klines())
        pair = request.url.params["symbol"]
        return httpx.Response(200, json=_ticker(self.prices.get(pair, "64250.10")))

    async def aclose(self) -> None:
        self.closed = True


def _live_provider(config: AppConfig, upstream: _SlowUpstream) -> LiveMarketDataProvider:
    client = BinanceClient(base_url=config.market_data.base_url, transport=upstream)
    return LiveMarketDataProvider(config, client=client)


class _ExplodingEngine(PredictionEngine):
    def predict(self, symbol, snapshot):
        raise RuntimeError("engine exploded")


@pytest.fixture
def client(sim_config, history_store):
    return TestClient(create_app(sim_config, store=history_store))


@pytest.fixture
def no_network(monkeypatch):
    async def _refuse(self, request, **kwargs):
        raise AssertionError(f"unexpected network call to {request.url}")

    monkeypatch.setattr(httpx.AsyncClient, "send", _refuse)


class TestInvalidAction:
    def test_bogus_action_is_400(self, client):
        resp = client.get("/api/signal", params={"action": "bogus"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid action"}


class TestPredict:
    def test_simulation_returns_all_symbols(self, client, no_network):
        resp = client.get("/api/signal", params={"action": "predict"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["mode"] == "simulation"
        assert set(data["predictions"]) == {"BTC", "ETH", "SOL"}
        assert "timestamp" in data

        btc = data["predictions"]["BTC"]
        assert btc["symbol"] == "BTC"
        assert set(btc["predictions"]) == {"30m", "1h", "24h"}
        assert btc["market_sentiment"] in {"BULLISH", "BEARISH", "NEUTRAL"}
        assert len(btc["key_factors"]) == 4
        assert "generated_at" in btc
        for horizon in btc["predictions"].values():
            assert set(horizon) == {"direction", "probability", "target_price", "stop_loss", "confidence"}

    def test_default_action_is_predict(self, client, no_network):
        resp = client.get("/api/signal")
        assert resp.status_code == 200
        assert set(resp.json()["predictions"]) == {"BTC", "ETH", "SOL"}

    def test_metadata(self, client):
        meta = client.get("/api/signal").json()["metadata"]
        assert meta["confidence_threshold"] == 0.70
        assert meta["model"] == "MiniMax-M2.1"
        assert meta["fallback"] == "rule-based"
        assert meta["disclaimer"]

    def test_not_recorded_by_default(self, client):
        client.get("/api/signal", params={"action": "predict"})
        status = client.get("/api/signal", params={"action": "status"}).json()
        assert status["total_signals"] == 0

    def test_recorded_when_enabled(self, history_path):
        config = AppConfig(
            simulation_mode=True,
            storage={"path": str(history_path), "record_predictions": True},
        )
        client = TestClient(create_app(config))
        client.get("/api/signal", params={"action": "predict"})
        history = client.get("/api/signal", params={"action": "history"}).json()["history"]
        assert [h["symbol"] for h in history] == ["BTC", "ETH", "SOL"]
        assert all("timestamp" in h for h in history)

    def test_failed_symbols_silently_omitted(self, sim_config, history_store):
        provider = _PartialProvider(sim_config, down={"ETH"})
        client = TestClient(create_app(sim_config, provider=provider, store=history_store))
        resp = client.get("/api/signal", params={"action": "predict"})
        assert resp.status_code == 200
        assert set(resp.json()["predictions"]) == {"BTC", "SOL"}
        assert provider.closed == 0

    def test_all_symbols_down_is_still_success(self, sim_config, history_store):
        provider = _PartialProvider(sim_config, down={"BTC", "ETH", "SOL"})
        client = TestClient(create_app(sim_config, provider=provider, store=history_store))
        data = client.get("/api/signal").json()
        assert data["success"] is True
        assert data["predictions"] == {}

    def test_live_mode_label(self, history_path, history_store):
        config = AppConfig(simulation_mode=False, storage={"path": str(history_path)})
        provider = _PartialProvider(config, down=set())
        client = TestClient(create_app(config, provider=provider, store=history_store))
        assert client.get("/api/signal").json()["mode"] == "live"


class TestLivePredict:
    def test_zero_price_drops_only_that_symbol(self, history_path, history_store):
        config = AppConfig(storage={"path": str(history_path)})
        upstream = _SlowUpstream(prices={"ETHUSDT": "0.00000000"})
        app = create_app(config, provider=_live_provider(config, upstream), store=history_store)
        resp = TestClient(app).get("/api/signal", params={"action": "predict"})
        assert resp.status_code == 200
        assert set(resp.json()["predictions"]) == {"BTC", "SOL"}

    def test_overlapping_predicts_keep_every_symbol(self, history_path, history_store):
        config = AppConfig(storage={"path": str(history_path)})
        upstream = _SlowUpstream(delay=0.05)
        service = SignalService(
            config=config,
            provider=_live_provider(config, upstream),
            engine=PredictionEngine(),
            store=history_store,
        )

        async def _run():
            first = asyncio.create_task(service.predict())
            await asyncio.sleep(0.08)
            second = asyncio.create_task(service.predict())
            return await asyncio.gather(first, second)

        first, second = asyncio.run(_run())
        assert set(first["predictions"]) == {"BTC", "ETH", "SOL"}
        assert set(second["predictions"]) == {"BTC", "ETH", "SOL"}
        assert upstream.closed is False


class TestLifespan:
    def test_provider_closed_once_at_shutdown(self, sim_config, history_store):
        provider = _PartialProvider(sim_config, down=set())
        with TestClient(create_app(sim_config, provider=provider, store=history_store)) as client:
            client.get("/api/signal")
            client.get("/api/signal")
            assert provider.closed == 0
        assert provider.closed == 1


class TestHistory:
    def test_empty(self, client):
        data = client.get("/api/signal", params={"action": "history"}).json()
        assert data == {"success": True, "history": [], "win_rate": {"total": 0, "wins": 0, "rate": 0}}

    def test_last_twenty(self, client, history_store, make_signal):
        for i in range(25):
            history_store.append(make_signal(f"S{i}"))
        data = client.get("/api/signal", params={"action": "history"}).json()
        assert len(data["history"]) == 20
        assert data["history"][0]["symbol"] == "S5"
        assert data["history"][-1]["symbol"] == "S24"

    def test_win_rate_over_full_history(self, client, history_store, make_signal):
        history_store.append(make_signal(result="WIN"))
        history_store.append(make_signal(result="WIN"))
        history_store.append(make_signal(result="LOSS"))
        data = client.get("/api/signal", params={"action": "history"}).json()
        assert data["win_rate"] == {"total": 3, "wins": 2, "rate": "66.7"}
        assert data["history"][0]["result"] == "WIN"


class TestStatus:
    def test_five_unscored_entries(self, client, history_store, make_signal):
        for _ in range(5):
            history_store.append(make_signal())
        data = client.get("/api/signal", params={"action": "status"}).json()
        assert data["success"] is True
        assert data["status"] == "active"
        assert data["total_signals"] == 5
        assert data["win_rate"] == {"total": 0, "wins": 0, "rate": 0}
        assert data["uptime"] >= 0

    def test_corrupt_history_reads_as_empty(self, client, history_path):
        history_path.write_text("[{]")
        data = client.get("/api/signal", params={"action": "status"}).json()
        assert data["total_signals"] == 0


class TestErrors:
    def test_unexpected_exception_is_500(self, sim_config, history_store):
        app = create_app(sim_config, engine=_ExplodingEngine(), store=history_store)
        resp = TestClient(app).get("/api/signal", params={"action": "predict"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "engine exploded"}

    def test_store_failure_is_500(self, sim_config, history_store, monkeypatch):
        def _boom():
            raise OSError("disk on fire")

        monkeypatch.setattr(history_store, "load_all", _boom)
        client = TestClient(create_app(sim_config, store=history_store))
        resp = client.get("/api/signal", params={"action": "status"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "disk on fire"}


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
