from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        timeout: float = 15.0,
        attempts: int = 1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.attempts = attempts
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def post(
        self,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        logger.debug(f"HTTP POST {url} json_keys={list(json.keys()) if json else None}")
        retrying = AsyncRetrying(
            reraise=True,
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_exception_type(httpx.HTTPError),
        )
        async for attempt in retrying:
            with attempt:
                resp = await self._client.post(url, json=json, headers=headers)
                resp.raise_for_status()
        return resp

    async def aclose(self) -> None:
        await self._client.aclose()
