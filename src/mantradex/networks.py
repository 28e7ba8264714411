"""Network configuration for MANTRA chains.

Built-in networks:
- mantra-dukong-1: public testnet (default)
- mantra-1: mainnet

Extra networks can be merged in from a JSON object (CUSTOM_NETWORKS).
"""

import json
import logging
from dataclasses import dataclass, fields
from typing import Optional

from mantradex.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class NetworkConfig:
    """Configuration for a single network."""

    # Required fields (no defaults) - must come first
    name: str
    chain_id: str
    rpc_endpoint: str
    api_endpoint: str  # LCD / REST endpoint used for contract queries
    prefix: str  # bech32 address prefix
    denom: str  # native fee denom
    gas_price: str

    # Optional fields (with defaults)
    is_mainnet: bool = False
    default_network: bool = False
    display_denom: Optional[str] = None
    display_denom_exponent: int = 6
    explorer_url: Optional[str] = None
    dex_contract_address: Optional[str] = None

    def tx_explorer_url(self, tx_hash: str) -> Optional[str]:
        """Get explorer link for a transaction, None if the network has no explorer."""
        if not self.explorer_url:
            return None
        return f"{self.explorer_url.rstrip('/')}/tx/{tx_hash}"

    @property
    def has_dex(self) -> bool:
        return bool(self.dex_contract_address)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# ======================
# Network Configurations
# ======================

NETWORKS: dict[str, NetworkConfig] = {
    "mantra-dukong-1": NetworkConfig(
        name="mantra-dukong-1",
        chain_id="mantra-dukong-1",
        rpc_endpoint="https://rpc.dukong.mantrachain.io",
        api_endpoint="https://api.dukong.mantrachain.io",
        prefix="mantra",
        denom="uom",
        gas_price="0.01",
        is_mainnet=False,
        default_network=True,
        display_denom="OM",
        display_denom_exponent=6,
        explorer_url="https://www.mintscan.io/mantra-testnet",
        dex_contract_address="mantra1us7rryvauhpe82fff0t6gjthdraqmtm5gw8c808f6eqzuxmulacqzkzdal",
    ),
    "mantra-1": NetworkConfig(
        name="mantra-1",
        chain_id="mantra-1",
        rpc_endpoint="https://rpc.mantrachain.io",
        api_endpoint="https://api.mantrachain.io",
        prefix="mantra",
        denom="uom",
        gas_price="0.01",
        is_mainnet=True,
        default_network=False,
        display_denom="OM",
        display_denom_exponent=6,
        explorer_url="https://www.mintscan.io/mantra",
        dex_contract_address="mantra1466nf3zuxpya8q9emxukd7vftaf6h4psr0a07srl5zw74zh84yjqagspfm",
    ),
}

DEFAULT_NETWORK = "mantra-dukong-1"

# camelCase keys accepted in CUSTOM_NETWORKS
_FIELD_ALIASES = {
    "chainId": "chain_id",
    "rpcEndpoint": "rpc_endpoint",
    "apiEndpoint": "api_endpoint",
    "gasPrice": "gas_price",
    "isMainnet": "is_mainnet",
    "defaultNetwork": "default_network",
    "displayDenom": "display_denom",
    "displayDenomExponent": "display_denom_exponent",
    "explorerUrl": "explorer_url",
    "dexContractAddress": "dex_contract_address",
}


def parse_custom_networks(raw: Optional[str]) -> dict[str, NetworkConfig]:
    """Parse a JSON object of extra networks keyed by name.

    Invalid JSON or entries is logged and skipped, never fatal.
    """
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse CUSTOM_NETWORKS: {e}")
        return {}

    if not isinstance(data, dict):
        logger.error("CUSTOM_NETWORKS must be a JSON object keyed by network name")
        return {}

    known = {f.name for f in fields(NetworkConfig)}
    result = {}
    for name, entry in data.items():
        if not isinstance(entry, dict):
            logger.warning(f"Skipping custom network {name}: expected an object")
            continue
        kwargs = {"name": name}
        for key, value in entry.items():
            key = _FIELD_ALIASES.get(key, key)
            if key in known:
                kwargs[key] = value
        kwargs.setdefault("chain_id", name)
        try:
            result[name] = NetworkConfig(**kwargs)
        except TypeError as e:
            logger.warning(f"Skipping custom network {name}: {e}")
    if result:
        logger.info(f"Custom networks loaded: {list(result)}")
    return result


def list_networks(custom_networks: Optional[str] = None) -> dict[str, NetworkConfig]:
    """Get built-in networks merged with any custom ones."""
    networks = dict(NETWORKS)
    networks.update(parse_custom_networks(custom_networks))
    return networks


def get_network(name: str, custom_networks: Optional[str] = None) -> NetworkConfig:
    """Get network config by name.

    Raises:
        ConfigurationError: If the network is not configured
    """
    network = list_networks(custom_networks).get(name)
    if network is None:
        raise ConfigurationError(f"Network {name} not found")
    return network
