"""DEX request and response contracts.

Base-unit amounts travel as decimal strings so no precision is lost.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from mantradex.dex.models import Coin, SwapRequest

AMOUNT_PATTERN = r"^\d+$"


class SimulateSwapRequest(BaseModel):
    """Request to simulate a swap."""

    token_in_denom: str = Field(..., min_length=1, description="Denomination of the token to swap from")
    token_in_amount: str = Field(
        ..., pattern=AMOUNT_PATTERN, description="Amount to swap in base units"
    )
    token_out_denom: str = Field(..., min_length=1, description="Denomination of the token to swap to")

    def to_swap_request(self) -> SwapRequest:
        return SwapRequest(
            token_in=Coin(denom=self.token_in_denom, amount=int(self.token_in_amount)),
            token_out_denom=self.token_out_denom,
        )


class SwapRequestBody(SimulateSwapRequest):
    """Request to execute a swap."""

    slippage: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="Maximum acceptable slippage percentage (1 = 1%)",
    )
    memo: Optional[str] = Field(default=None, description="Optional memo for the transaction")

    def to_swap_request(self) -> SwapRequest:
        return SwapRequest(
            token_in=Coin(denom=self.token_in_denom, amount=int(self.token_in_amount)),
            token_out_denom=self.token_out_denom,
            slippage=self.slippage,
            memo=self.memo,
        )


class PoolsResponse(BaseModel):
    success: bool = True
    network: str
    pools: list[dict] = Field(default_factory=list)


class RoutesResponse(BaseModel):
    success: bool = True
    network: str
    routes: list[list[dict]] = Field(default_factory=list, description="Routes as contract swap operations")


class SimulationResponse(BaseModel):
    success: bool = True
    network: str
    expected_return: str = Field(..., description="Projected output in base units")
    routes: list[dict] = Field(..., description="Best route as contract swap operations")


class SwapResponse(BaseModel):
    success: bool
    network: str
    transaction_hash: str
    explorer_url: Optional[str] = None
    gas_used: str
    gas_wanted: str
    sender: Optional[str] = None
    expected_return: Optional[str] = None
    minimum_receive: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    detail: str
