"""Route discovery between two denoms.

Direct (single-pool) routes win outright; only when there are none are
two-hop routes through a shared intermediate denom searched. Longer routes
are never considered.
"""

import logging

from mantradex.dex.models import Pool, Route, SwapOperation
from mantradex.dex.pools import PoolRegistry

logger = logging.getLogger(__name__)


def find_direct_routes(pools: list[Pool], token_in: str, token_out: str) -> list[Route]:
    """One single-hop route per pool holding both denoms, duplicates included."""
    return [
        [SwapOperation(pool.pool_identifier, token_in, token_out)]
        for pool in pools
        if pool.has_denom(token_in) and pool.has_denom(token_out)
    ]


def find_two_hop_routes(pools: list[Pool], token_in: str, token_out: str) -> list[Route]:
    """Routes token_in -> X -> token_out over every (in pool, X, out pool) triple."""
    pools_in = [pool for pool in pools if pool.has_denom(token_in)]
    pools_out = [pool for pool in pools if pool.has_denom(token_out)]

    routes = []
    for in_pool in pools_in:
        for intermediate in in_pool.asset_denoms:
            if intermediate == token_in:
                continue
            for out_pool in pools_out:
                if not out_pool.has_denom(intermediate):
                    continue
                routes.append([
                    SwapOperation(in_pool.pool_identifier, token_in, intermediate),
                    SwapOperation(out_pool.pool_identifier, intermediate, token_out),
                ])
    return routes


def find_routes(pools: list[Pool], token_in: str, token_out: str) -> list[Route]:
    """Find candidate routes from token_in to token_out.

    Returns:
        Direct routes if any exist, otherwise all two-hop routes.
        Empty when the denoms are not connected within two hops.
    """
    direct = find_direct_routes(pools, token_in, token_out)
    if direct:
        return direct
    return find_two_hop_routes(pools, token_in, token_out)


class RouteFinder:
    """Discovers routes against a freshly fetched pool list."""

    def __init__(self, registry: PoolRegistry):
        self.registry = registry

    async def find_routes(self, token_in: str, token_out: str) -> list[Route]:
        pools = await self.registry.list_pools()
        routes = find_routes(pools, token_in, token_out)

        if routes:
            hops = len(routes[0])
            logger.info(f"Found {len(routes)} {hops}-hop route(s) for {token_in} -> {token_out}")
        else:
            logger.warning(f"No route for {token_in} -> {token_out} across {len(pools)} pools")
        return routes
