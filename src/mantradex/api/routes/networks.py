"""Network listing endpoints."""

from fastapi import APIRouter

from mantradex.config import get_settings
from mantradex.networks import list_networks

router = APIRouter(prefix="/networks")


@router.get("")
async def get_networks() -> dict:
    """List configured networks.

    Callers should pick a network name from here before using /dex routes.
    """
    networks = list_networks(get_settings().custom_networks)
    return {
        "success": True,
        "networks": [network.to_dict() for network in networks.values()],
    }
