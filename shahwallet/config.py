from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Runtime
    LOG_LEVEL: str = Field(default="INFO")

    # Balancer V2
    BALANCER_SUBGRAPH: str = Field(default="https://api.thegraph.com/subgraphs/name/balancer-labs/balancer-v2")
    BALANCER_VAULT: str = Field(default="0xBA12222222228d8Ba445958a75a0704d566BF2C8")
    BALANCER_POOL_TYPES: List[str] = Field(default_factory=lambda: ["Weighted", "ComposableStable", "Stable"])

    # Pool discovery
    POOL_CACHE_TTL_MS: int = Field(default=60_000, ge=0)
    MIN_LIQUIDITY_USD: float = Field(default=1000.0, ge=0.0)
    MAX_POOLS_TO_CHECK: int = Field(default=5, ge=1)

    # HTTP
    HTTP_TIMEOUT_SECONDS: float = Field(default=15.0, gt=0.0)
    HTTP_RETRY_ATTEMPTS: int = Field(default=1, ge=1)  # 1 = no retry


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
