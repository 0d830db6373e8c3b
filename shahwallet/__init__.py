"""Balancer pool discovery for the SHAH Wallet swap router."""

from shahwallet.services.pool_cache import PoolCache, get_pool_swap_fee_bps, get_token_from_pool

__all__ = ["PoolCache", "get_pool_swap_fee_bps", "get_token_from_pool"]
