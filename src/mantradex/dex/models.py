"""Data model for the DEX core.

Amounts are base-unit Python ints (arbitrary precision); fee shares and
slippage are Decimals. Nothing here is ever converted to float.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

DEFAULT_SLIPPAGE = Decimal("1")  # percent

POOL_TYPE_CONSTANT_PRODUCT = "constant_product"
POOL_TYPE_STABLE_SWAP = "stable_swap"


@dataclass(frozen=True)
class Coin:
    """A denom and a base-unit amount."""

    denom: str
    amount: int

    @classmethod
    def from_dict(cls, data: dict) -> "Coin":
        return cls(denom=data["denom"], amount=int(data["amount"]))

    def to_dict(self) -> dict:
        return {"denom": self.denom, "amount": str(self.amount)}


@dataclass(frozen=True)
class PoolFees:
    """Fee shares of a pool, each a fraction of the swapped amount."""

    protocol_fee: Decimal
    swap_fee: Decimal
    burn_fee: Decimal
    extra_fees: tuple[Decimal, ...] = ()

    @property
    def total(self) -> Decimal:
        return self.protocol_fee + self.swap_fee + self.burn_fee + sum(self.extra_fees, Decimal("0"))

    @classmethod
    def from_dict(cls, data: dict) -> "PoolFees":
        return cls(
            protocol_fee=Decimal(data["protocol_fee"]["share"]),
            swap_fee=Decimal(data["swap_fee"]["share"]),
            burn_fee=Decimal(data["burn_fee"]["share"]),
            extra_fees=tuple(Decimal(fee["share"]) for fee in data.get("extra_fees") or []),
        )

    def to_dict(self) -> dict:
        return {
            "protocol_fee": {"share": str(self.protocol_fee)},
            "swap_fee": {"share": str(self.swap_fee)},
            "burn_fee": {"share": str(self.burn_fee)},
            "extra_fees": [{"share": str(share)} for share in self.extra_fees],
        }


@dataclass(frozen=True)
class Pool:
    """Snapshot of one liquidity pool as reported by the DEX contract."""

    pool_identifier: str
    asset_denoms: tuple[str, ...]
    asset_decimals: tuple[int, ...]
    pool_type: str
    fees: PoolFees
    assets: tuple[Coin, ...]
    lp_denom: str
    total_share: Coin
    amp: Optional[int] = None  # stable swap amplification

    def has_denom(self, denom: str) -> bool:
        return denom in self.asset_denoms

    @property
    def is_stable_swap(self) -> bool:
        return self.pool_type == POOL_TYPE_STABLE_SWAP

    def reserve_of(self, denom: str) -> Optional[int]:
        """Get the current reserve of a denom, None if not in the pool."""
        for asset in self.assets:
            if asset.denom == denom:
                return asset.amount
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Pool":
        """Parse a pool record of the contract's `pools` query."""
        info = data["pool_info"]

        raw_type = info.get("pool_type", POOL_TYPE_CONSTANT_PRODUCT)
        amp = None
        if isinstance(raw_type, dict):
            pool_type = next(iter(raw_type))
            if pool_type == POOL_TYPE_STABLE_SWAP:
                amp = int(raw_type[pool_type]["amp"])
        else:
            pool_type = raw_type

        return cls(
            pool_identifier=info["pool_identifier"],
            asset_denoms=tuple(info["asset_denoms"]),
            asset_decimals=tuple(int(d) for d in info.get("asset_decimals", [])),
            pool_type=pool_type,
            fees=PoolFees.from_dict(info["pool_fees"]),
            assets=tuple(Coin.from_dict(a) for a in info.get("assets", [])),
            lp_denom=info["lp_denom"],
            total_share=Coin.from_dict(data["total_share"]),
            amp=amp,
        )

    def to_dict(self) -> dict:
        return {
            "pool_identifier": self.pool_identifier,
            "asset_denoms": list(self.asset_denoms),
            "asset_decimals": list(self.asset_decimals),
            "pool_type": self.pool_type,
            "amp": self.amp,
            "pool_fees": self.fees.to_dict(),
            "assets": [a.to_dict() for a in self.assets],
            "lp_denom": self.lp_denom,
            "total_share": self.total_share.to_dict(),
        }


@dataclass(frozen=True)
class SwapOperation:
    """One hop of a route: swap token_in for token_out in a single pool."""

    pool_identifier: str
    token_in_denom: str
    token_out_denom: str

    def to_msg(self) -> dict:
        """Contract wire shape of the hop."""
        return {
            "mantra_swap": {
                "pool_identifier": self.pool_identifier,
                "token_in_denom": self.token_in_denom,
                "token_out_denom": self.token_out_denom,
            }
        }


# Ordered, non-empty list of hops where each hop's output feeds the next hop's input
Route = list[SwapOperation]


def route_to_msg(route: Route) -> list[dict]:
    return [op.to_msg() for op in route]


def is_contiguous(route: Route) -> bool:
    """Check that every hop's output denom is the next hop's input denom."""
    if not route:
        return False
    return all(a.token_out_denom == b.token_in_denom for a, b in zip(route, route[1:]))


@dataclass(frozen=True)
class SwapRequest:
    """Request to swap token_in for token_out_denom.

    Attributes:
        token_in: Offered coin (base units)
        token_out_denom: Denom to receive
        slippage: Tolerance in percent (1 = 1%), None for the default
        memo: Optional transaction memo
    """

    token_in: Coin
    token_out_denom: str
    slippage: Optional[Decimal] = None
    memo: Optional[str] = None

    def __post_init__(self):
        if self.token_in.amount < 0:
            raise ValueError("Swap amount must not be negative")
        if self.slippage is not None and not Decimal("0") <= self.slippage <= Decimal("100"):
            raise ValueError("Slippage must be between 0 and 100 percent")


@dataclass(frozen=True)
class SimulationResult:
    """Best route for a swap and its projected base-unit output."""

    expected_return: int
    route: Route

    def to_dict(self) -> dict:
        return {
            "expected_return": str(self.expected_return),
            "routes": route_to_msg(self.route),
        }


@dataclass
class TransactionOutcome:
    """Result of a committed transaction."""

    transaction_hash: str
    explorer_url: Optional[str]
    success: bool
    gas_used: int
    gas_wanted: int
    extra: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "transaction_hash": self.transaction_hash,
            "explorer_url": self.explorer_url,
            "success": self.success,
            "gas_used": str(self.gas_used),
            "gas_wanted": str(self.gas_wanted),
            **self.extra,
        }
