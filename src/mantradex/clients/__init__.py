"""Chain clients used by the DEX core.

- LcdQueryClient: read-only CosmWasm smart queries over REST
- CosmpySigningClient: signs and broadcasts execute-contract transactions
"""

from mantradex.clients.base import (
    ContractQueryClient,
    ContractSigningClient,
    ExecuteResult,
    format_funds,
)
from mantradex.clients.lcd import LcdQueryClient

__all__ = [
    "ContractQueryClient",
    "ContractSigningClient",
    "ExecuteResult",
    "format_funds",
    "LcdQueryClient",
]
