from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from shahwallet.clients.balancer import fetch_pools_for_token
from shahwallet.config import Settings, get_settings
from shahwallet.http import HttpClient
from shahwallet.models import CacheStats, Pool, PoolToken

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class CacheEntry:
    pools: List[Pool]
    timestamp: float  # ms


class PoolCache:
    """Read-through cache of Balancer pools keyed by lowercased token address.

    Entries stay fresh for ``ttl_ms`` and are overwritten on the first access
    after they expire; nothing is evicted in the background. Failed lookups
    return an empty list and are not cached, so the next call retries.
    """

    def __init__(
        self,
        http: Optional[HttpClient] = None,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], float]] = None,
        ttl_ms: Optional[int] = None,
        subgraph_url: Optional[str] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_http = http is None
        self.http = http or HttpClient(
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            attempts=self.settings.HTTP_RETRY_ATTEMPTS,
        )
        self.clock = clock or _now_ms
        self.ttl_ms = self.settings.POOL_CACHE_TTL_MS if ttl_ms is None else ttl_ms
        self.subgraph_url = subgraph_url or self.settings.BALANCER_SUBGRAPH
        self._entries: Dict[str, CacheEntry] = {}

    async def fetch_pools_for_token(self, token_address: str) -> List[Pool]:
        key = token_address.lower()
        entry = self._entries.get(key)
        if entry and self.clock() - entry.timestamp < self.ttl_ms:
            logger.debug(f"Pool cache hit for {key} ({len(entry.pools)} pools)")
            return entry.pools

        logger.debug(f"Pool cache miss for {key}")
        try:
            pools = await fetch_pools_for_token(self.http, self.subgraph_url, key, self.settings)
        except Exception as e:
            logger.warning(f"Failed to fetch Balancer pools for {key}: {e}")
            return []

        self._entries[key] = CacheEntry(pools=pools, timestamp=self.clock())
        return pools

    async def find_pools_for_pair(self, token_a: str, token_b: str) -> List[Pool]:
        """Pools holding both tokens, in the order they appear for ``token_a``."""
        pools_a, _ = await asyncio.gather(
            self.fetch_pools_for_token(token_a),
            self.fetch_pools_for_token(token_b),
        )

        seen: set[str] = set()
        common: List[Pool] = []
        for pool in pools_a:
            if pool.id in seen:
                continue
            if get_token_from_pool(pool, token_b) is None:
                continue
            seen.add(pool.id)
            common.append(pool)
        return common

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> CacheStats:
        return CacheStats(size=len(self._entries), entries=list(self._entries.keys()))

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()


def get_token_from_pool(pool: Pool, token_address: str) -> Optional[PoolToken]:
    target = token_address.lower()
    for token in pool.tokens:
        if token.address.lower() == target:
            return token
    return None


def get_pool_swap_fee_bps(pool: Pool) -> int:
    return round(pool.swap_fee * 10000)
