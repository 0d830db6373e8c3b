from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from shahwallet.http import HttpClient

logger = logging.getLogger(__name__)


class SubgraphError(RuntimeError):
    pass


async def graphql_query(http: HttpClient, url: str, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"query": query, "variables": variables or {}}
    resp = await http.post(url, json=payload, headers={"Content-Type": "application/json"})
    data = resp.json()
    if not isinstance(data, dict):
        raise SubgraphError(f"Unexpected GraphQL payload from {url}: {type(data).__name__}")
    if "errors" in data:
        logger.warning(f"GraphQL errors from {url}: {data['errors']}")
        raise SubgraphError("GraphQL query failed")
    return data.get("data") or {}
