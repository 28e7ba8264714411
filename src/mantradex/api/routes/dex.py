"""DEX endpoints: pools, routes, simulation and swaps."""

import logging

from fastapi import APIRouter, Depends, Query

from mantradex.api.contracts.dex import (
    PoolsResponse,
    RoutesResponse,
    SimulateSwapRequest,
    SimulationResponse,
    SwapRequestBody,
    SwapResponse,
)
from mantradex.api.deps import get_dex_service
from mantradex.dex.models import route_to_msg
from mantradex.dex.service import DexService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dex/{network}")


@router.get("/pools", response_model=PoolsResponse)
async def get_pools(service: DexService = Depends(get_dex_service)) -> PoolsResponse:
    """Get all available liquidity pools from the DEX."""
    pools = await service.get_pools()
    return PoolsResponse(network=service.network_name, pools=[pool.to_dict() for pool in pools])


@router.get("/routes", response_model=RoutesResponse)
async def find_routes(
    token_in_denom: str = Query(..., min_length=1),
    token_out_denom: str = Query(..., min_length=1),
    service: DexService = Depends(get_dex_service),
) -> RoutesResponse:
    """Find swap routes between two tokens.

    An empty list means the tokens are not connected within two hops.
    """
    routes = await service.find_routes(token_in_denom, token_out_denom)
    return RoutesResponse(
        network=service.network_name,
        routes=[route_to_msg(route) for route in routes],
    )


@router.post("/simulate", response_model=SimulationResponse)
async def simulate_swap(
    request: SimulateSwapRequest,
    service: DexService = Depends(get_dex_service),
) -> SimulationResponse:
    """Simulate a swap without executing it. READ-ONLY."""
    result = await service.simulate_swap(request.to_swap_request())
    return SimulationResponse(network=service.network_name, **result.to_dict())


@router.post("/swap", response_model=SwapResponse)
async def swap(
    request: SwapRequestBody,
    service: DexService = Depends(get_dex_service),
) -> SwapResponse:
    """Execute a swap on the DEX. Moves funds on-chain."""
    logger.info(
        f"Swap requested on {service.network_name}: {request.token_in_amount} "
        f"{request.token_in_denom} -> {request.token_out_denom}"
    )
    outcome = await service.swap(request.to_swap_request())
    return SwapResponse(network=service.network_name, **outcome.to_dict())
