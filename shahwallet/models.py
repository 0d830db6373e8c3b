from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PoolType = Literal["Weighted", "ComposableStable", "Stable"]


class PoolToken(BaseModel):
    address: str
    symbol: str = ""
    decimals: int = Field(default=18, ge=0, le=18)
    weight: Optional[float] = Field(default=None, description="Token weight, weighted pools only")
    balance: str = Field(default="0", description="Pool balance as a decimal string")

    @field_validator("address")
    @classmethod
    def _lower_address(cls, v: str) -> str:
        return v.lower()


class Pool(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    address: str
    pool_type: PoolType = Field(..., alias="poolType")
    total_liquidity: str = Field(default="0", alias="totalLiquidity", description="USD liquidity as a decimal string")
    swap_fee: float = Field(default=0.0, alias="swapFee", description="Fee as a fraction, 0.003 = 0.3%")
    total_weight: Optional[float] = Field(default=None, alias="totalWeight")
    amp: Optional[float] = None
    tokens: List[PoolToken] = Field(default_factory=list)
    last_update: int = Field(default=0, alias="lastUpdate", description="Unix timestamp")

    @field_validator("address")
    @classmethod
    def _lower_address(cls, v: str) -> str:
        return v.lower()


class SubgraphPoolsData(BaseModel):
    pools: List[Pool]


class CacheStats(BaseModel):
    size: int
    entries: List[str]
