"""Explicit per-network context for DEX operations."""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from mantradex.clients.base import ContractQueryClient, ContractSigningClient
from mantradex.clients.lcd import LcdQueryClient
from mantradex.config import Settings, get_settings
from mantradex.errors import ConfigurationError
from mantradex.networks import NetworkConfig, get_network

logger = logging.getLogger(__name__)


@dataclass
class DexContext:
    """Clients and network settings one DEX call runs against.

    The signing client may be supplied directly or built on first use from
    signing_client_factory, so a bad wallet never blocks read-only calls.
    Switching networks means building a new context.
    """

    network: NetworkConfig
    query_client: ContractQueryClient
    signing_client: Optional[ContractSigningClient] = None
    signing_client_factory: Optional[Callable[[], ContractSigningClient]] = None

    @property
    def dex_contract_address(self) -> str:
        if not self.network.dex_contract_address:
            raise ConfigurationError(
                f"DEX contract address not found for network {self.network.name}"
            )
        return self.network.dex_contract_address

    def require_signing_client(self) -> ContractSigningClient:
        """Get the signing client, building it on first use.

        Raises:
            ConfigurationError: If no wallet is configured or it cannot be loaded
        """
        if self.signing_client is None and self.signing_client_factory is not None:
            try:
                self.signing_client = self.signing_client_factory()
            except Exception as e:
                logger.error(f"Failed to load signing wallet for {self.network.name}: {e}")
                raise ConfigurationError(f"Invalid signing wallet: {e}") from e

        if self.signing_client is None:
            raise ConfigurationError("No signing wallet configured (set WALLET_MNEMONIC)")
        return self.signing_client


def create_dex_context(
    network_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> DexContext:
    """Create a context for a network from settings.

    When a wallet mnemonic is configured the signing client is loaded lazily,
    on the first swap.
    """
    settings = settings or get_settings()
    network = get_network(network_name or settings.default_network, settings.custom_networks)
    query_client = LcdQueryClient(network.api_endpoint, timeout=settings.request_timeout)

    signing_client_factory = None
    if settings.has_wallet:
        from mantradex.clients.cosmpy import CosmpySigningClient
        signing_client_factory = partial(
            CosmpySigningClient.from_mnemonic, settings.wallet_mnemonic, network
        )
    else:
        logger.warning(f"No wallet configured - {network.name} context is read-only")

    return DexContext(
        network=network,
        query_client=query_client,
        signing_client_factory=signing_client_factory,
    )
