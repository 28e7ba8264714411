"""Swap simulation: rank candidate routes by the contract's projected return."""

import logging
from functools import reduce

from mantradex.dex.context import DexContext
from mantradex.dex.models import Route, SimulationResult, SwapRequest, route_to_msg
from mantradex.dex.routes import RouteFinder
from mantradex.errors import DexError, NoRouteError, QueryError

logger = logging.getLogger(__name__)


def _better(best: tuple[Route, int], candidate: tuple[Route, int]) -> tuple[Route, int]:
    # Strictly greater: ties keep the earlier route
    return candidate if candidate[1] > best[1] else best


class SwapSimulator:
    """Simulates every candidate route and keeps the best one."""

    def __init__(self, context: DexContext, route_finder: RouteFinder):
        self.context = context
        self.route_finder = route_finder

    async def simulate_route(self, route: Route, offer_amount: int) -> int:
        """Get the contract's projected return for one route.

        All routes, single-hop included, go through simulate_swap_operations.
        """
        contract_address = self.context.dex_contract_address
        query = {
            "simulate_swap_operations": {
                "operations": route_to_msg(route),
                "offer_amount": str(offer_amount),
            }
        }

        try:
            response = await self.context.query_client.query_contract_smart(contract_address, query)
            return int(response["return_amount"])
        except DexError:
            raise
        except Exception as e:
            logger.error(f"Simulation failed for route {route_to_msg(route)}: {e}")
            raise QueryError(f"Failed to simulate swap: {e}") from e

    async def simulate(self, request: SwapRequest) -> SimulationResult:
        """Find the route with the highest projected return.

        Raises:
            NoRouteError: If the denoms are not connected
            QueryError: If a pool or simulation query fails
        """
        token_in = request.token_in.denom
        token_out = request.token_out_denom

        routes = await self.route_finder.find_routes(token_in, token_out)
        if not routes:
            raise NoRouteError(token_in, token_out)

        # Sequential on purpose: one query in flight at a time
        simulated = []
        for route in routes:
            amount = await self.simulate_route(route, request.token_in.amount)
            logger.debug(f"Route {[op.pool_identifier for op in route]} returns {amount} {token_out}")
            simulated.append((route, amount))

        best_route, best_return = reduce(_better, simulated, (routes[0], 0))

        logger.info(
            f"Best route for {request.token_in.amount} {token_in} -> {token_out}: "
            f"{[op.pool_identifier for op in best_route]} returning {best_return}"
        )
        return SimulationResult(expected_return=best_return, route=best_route)
