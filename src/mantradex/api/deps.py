"""FastAPI dependencies."""

from functools import lru_cache

from mantradex.config import get_settings
from mantradex.dex.context import DexContext, create_dex_context
from mantradex.dex.service import DexService


@lru_cache(maxsize=None)
def _get_context(network: str) -> DexContext:
    # Clients only; pools are never cached
    return create_dex_context(network, get_settings())


def get_dex_service(network: str) -> DexService:
    """DEX service for the network named in the request path."""
    return DexService(_get_context(network), get_settings().default_slippage)
