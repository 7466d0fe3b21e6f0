#!/usr/bin/env python3
"""Smoke test for a running Crypto Signal API."""

import asyncio
import json
import os

import httpx

BASE_URL = os.environ.get("CRYPTO_SIGNAL_URL", "http://localhost:8000")


async def smoke_endpoints():
    """Hit every action once and print a short summary."""
    async with httpx.AsyncClient(timeout=30.0) as client:
        print("Testing Crypto Signal API...\n")

        # 1. Health check
        print("1. Testing /api/health")
        try:
            response = await client.get(f"{BASE_URL}/api/health")
            print(f"   Status: {response.status_code}")
            print(f"   Response: {json.dumps(response.json(), indent=2)}\n")
        except Exception as e:
            print(f"   Error: {e}\n")

        # 2. Predictions
        print("2. Testing /api/signal?action=predict")
        try:
            response = await client.get(f"{BASE_URL}/api/signal", params={"action": "predict"})
            print(f"   Status: {response.status_code}")
            data = response.json()
            print(f"   Mode: {data['mode']}")
            for symbol, signal in data["predictions"].items():
                calls = ", ".join(
                    f"{tf}={h['direction']}@{h['probability']:.2f}"
                    for tf, h in signal["predictions"].items()
                )
                print(f"   - {symbol} {signal['market_sentiment']}: {calls}")
            print()
        except Exception as e:
            print(f"   Error: {e}\n")

        # 3. History
        print("3. Testing /api/signal?action=history")
        try:
            response = await client.get(f"{BASE_URL}/api/signal", params={"action": "history"})
            print(f"   Status: {response.status_code}")
            data = response.json()
            print(f"   Entries returned: {len(data['history'])}")
            print(f"   Win rate: {data['win_rate']}\n")
        except Exception as e:
            print(f"   Error: {e}\n")

        # 4. Status
        print("4. Testing /api/signal?action=status")
        try:
            response = await client.get(f"{BASE_URL}/api/signal", params={"action": "status"})
            print(f"   Status: {response.status_code}")
            data = response.json()
            print(f"   Uptime: {data['uptime']:.1f}s, total signals: {data['total_signals']}\n")
        except Exception as e:
            print(f"   Error: {e}\n")

        # 5. Invalid action
        print("5. Testing /api/signal?action=bogus")
        try:
            response = await client.get(f"{BASE_URL}/api/signal", params={"action": "bogus"})
            print(f"   Status: {response.status_code} (expected 400)")
            print(f"   Response: {response.json()}\n")
        except Exception as e:
            print(f"   Error: {e}\n")


if __name__ == "__main__":
    asyncio.run(smoke_endpoints())
