from __future__ import annotations

import logging
from typing import List

from shahwallet.clients.graphql import graphql_query
from shahwallet.config import Settings
from shahwallet.http import HttpClient
from shahwallet.models import Pool, SubgraphPoolsData

logger = logging.getLogger(__name__)


POOLS_FOR_TOKEN_QUERY = """
query GetPoolsForToken($tokenAddress: Bytes!, $minLiquidity: BigDecimal!, $poolTypes: [String!]!, $first: Int!) {
  pools(
    where: {
      tokensList_contains: [$tokenAddress]
      totalLiquidity_gt: $minLiquidity
      poolType_in: $poolTypes
    }
    orderBy: totalLiquidity
    orderDirection: desc
    first: $first
  ) {
    id
    address
    poolType
    totalLiquidity
    swapFee
    totalWeight
    amp
    tokens {
      address
      symbol
      decimals
      weight
      balance
    }
    lastUpdate
  }
}
"""


async def fetch_pools_for_token(http: HttpClient, url: str, token_address: str, settings: Settings) -> List[Pool]:
    """Query Balancer pools holding ``token_address``, highest liquidity first.

    Transport, GraphQL and validation errors propagate to the caller.
    """
    variables = {
        "tokenAddress": token_address.lower(),
        "minLiquidity": str(settings.MIN_LIQUIDITY_USD),
        "poolTypes": list(settings.BALANCER_POOL_TYPES),
        "first": settings.MAX_POOLS_TO_CHECK,
    }
    data = await graphql_query(http, url, POOLS_FOR_TOKEN_QUERY, variables)
    pools = SubgraphPoolsData.model_validate(data).pools
    logger.debug(f"Balancer subgraph returned {len(pools)} pools for {variables['tokenAddress']}")
    return pools
