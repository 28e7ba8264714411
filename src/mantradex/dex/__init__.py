"""DEX routing, simulation and swap execution.

Flow: PoolRegistry -> RouteFinder -> SwapSimulator -> SwapExecutor,
wrapped by DexService.
"""

from mantradex.dex.context import DexContext, create_dex_context
from mantradex.dex.executor import (
    SwapExecutor,
    build_swap_message,
    max_spread,
    minimum_receive,
)
from mantradex.dex.models import (
    DEFAULT_SLIPPAGE,
    Coin,
    Pool,
    PoolFees,
    Route,
    SimulationResult,
    SwapOperation,
    SwapRequest,
    TransactionOutcome,
)
from mantradex.dex.pools import PoolRegistry
from mantradex.dex.routes import RouteFinder, find_routes
from mantradex.dex.service import DexService
from mantradex.dex.simulator import SwapSimulator

__all__ = [
    # Context
    "DexContext",
    "create_dex_context",
    # Models
    "DEFAULT_SLIPPAGE",
    "Coin",
    "Pool",
    "PoolFees",
    "Route",
    "SimulationResult",
    "SwapOperation",
    "SwapRequest",
    "TransactionOutcome",
    # Pipeline
    "PoolRegistry",
    "RouteFinder",
    "find_routes",
    "SwapSimulator",
    "SwapExecutor",
    "build_swap_message",
    "max_spread",
    "minimum_receive",
    "DexService",
]
