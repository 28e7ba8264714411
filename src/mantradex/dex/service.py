"""DEX service facade: the four operations exposed to callers."""

from decimal import Decimal
from typing import Optional

from mantradex.dex.context import DexContext
from mantradex.dex.executor import SwapExecutor
from mantradex.dex.models import Pool, Route, SimulationResult, SwapRequest, TransactionOutcome
from mantradex.dex.pools import PoolRegistry
from mantradex.dex.routes import RouteFinder
from mantradex.dex.simulator import SwapSimulator


class DexService:
    """Pools, routing, simulation and swaps for one network context."""

    def __init__(self, context: DexContext, default_slippage: Optional[Decimal] = None):
        self.context = context
        self.registry = PoolRegistry(context)
        self.route_finder = RouteFinder(self.registry)
        self.simulator = SwapSimulator(context, self.route_finder)
        self.executor = SwapExecutor(context, self.simulator, default_slippage)

    @property
    def network_name(self) -> str:
        return self.context.network.name

    async def get_pools(self) -> list[Pool]:
        return await self.registry.list_pools()

    async def find_routes(self, token_in_denom: str, token_out_denom: str) -> list[Route]:
        return await self.route_finder.find_routes(token_in_denom, token_out_denom)

    async def simulate_swap(self, request: SwapRequest) -> SimulationResult:
        return await self.simulator.simulate(request)

    async def swap(self, request: SwapRequest) -> TransactionOutcome:
        return await self.executor.swap(request)
