from typing import List
from pydantic import BaseModel, ConfigDict, Field


class TokenSupplyInfo(BaseModel):
    total_supply: int
    decimals: int = 0


class TreasuryBalance(BaseModel):
    treasury: str
    balance: int


class TreasuryBalanceOut(BaseModel):
    treasury: str
    balance: str


class CirculationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    decimals: int
    total_supply: str = Field(..., alias="totalSupply")
    circulating: str
    treasury_balances: List[TreasuryBalanceOut] = Field(default_factory=list, alias="treasuryBalances")
    timestamp: str
    source: str

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
