"""Health check endpoints."""

from fastapi import APIRouter

from mantradex import __version__
from mantradex.config import get_settings
from mantradex.networks import list_networks

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "mantradex"}


@router.get("/health/detailed")
async def detailed_health():
    """Readiness per network: DEX contract present, swaps possible.

    Nothing is queried on-chain; this reflects configuration only.
    """
    settings = get_settings()
    networks = list_networks(settings.custom_networks)

    readiness = {
        name: {
            "chain_id": network.chain_id,
            "dex_configured": network.has_dex,
            "swaps_enabled": network.has_dex and settings.has_wallet,
        }
        for name, network in networks.items()
    }
    default_ready = readiness.get(settings.default_network, {}).get("dex_configured", False)

    return {
        "status": "healthy" if default_ready else "degraded",
        "service": "mantradex",
        "version": __version__,
        "networks": readiness,
        "config": settings.get_safe_dict(),
    }
