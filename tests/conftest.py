"""
Shared fixtures: a controllable millisecond clock and a mock subgraph
served through httpx.MockTransport.
"""
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from shahwallet.config import Settings
from shahwallet.http import HttpClient

SUBGRAPH_URL = "https://subgraph.test/balancer-v2"


class FakeClock:
    def __init__(self, start: float = 1_700_000_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class MockSubgraph:
    """Answers pool queries from a token -> pools mapping and records every request."""

    def __init__(self):
        self.pools_by_token: Dict[str, List[Dict[str, Any]]] = {}
        self.requests: List[Dict[str, Any]] = []
        self.responder: Callable[[httpx.Request], httpx.Response] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        if self.responder is not None:
            return self.responder(request)
        token = body["variables"]["tokenAddress"]
        return httpx.Response(200, json={"data": {"pools": self.pools_by_token.get(token, [])}})

    def calls_for(self, token: str) -> int:
        return sum(1 for r in self.requests if r["variables"]["tokenAddress"] == token)


def make_pool(pool_id: str, token_addresses: List[str], **overrides: Any) -> Dict[str, Any]:
    pool = {
        "id": pool_id,
        "address": "0x" + pool_id.encode().hex().rjust(40, "0")[:40],
        "poolType": "Weighted",
        "totalLiquidity": "1000000",
        "swapFee": "0.003",
        "totalWeight": "1",
        "amp": None,
        "tokens": [
            {"address": addr, "symbol": f"T{i}", "decimals": 18, "weight": "0.5", "balance": "100"}
            for i, addr in enumerate(token_addresses)
        ],
        "lastUpdate": "1234567890",
    }
    pool.update(overrides)
    return pool


@pytest.fixture
def settings():
    return Settings(BALANCER_SUBGRAPH=SUBGRAPH_URL, POOL_CACHE_TTL_MS=60_000, _env_file=None)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def subgraph():
    return MockSubgraph()


@pytest_asyncio.fixture
async def http(subgraph):
    client = HttpClient(timeout=5.0, attempts=1, transport=httpx.MockTransport(subgraph.handler))
    yield client
    await client.aclose()
