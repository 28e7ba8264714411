"""Abstract interfaces for contract query and signing clients."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mantradex.dex.models import Coin


@dataclass
class ExecuteResult:
    """Result of a broadcast execute-contract transaction.

    Attributes:
        transaction_hash: Hash of the included transaction
        code: ABCI result code (0 = success)
        gas_used: Gas consumed
        gas_wanted: Gas limit requested
        raw_log: Raw log from the node (error text when code != 0)
    """
    transaction_hash: str
    code: int = 0
    gas_used: int = 0
    gas_wanted: int = 0
    raw_log: str = ""

    @property
    def success(self) -> bool:
        return self.code == 0


class ContractQueryClient(ABC):
    """Executes read-only smart contract queries."""

    @abstractmethod
    async def query_contract_smart(self, contract_address: str, msg: dict) -> dict:
        """Run a smart query and return the decoded JSON response.

        Args:
            contract_address: Bech32 contract address
            msg: JSON query message

        Returns:
            Decoded response payload
        """
        pass


class ContractSigningClient(ABC):
    """Signs and submits execute-contract transactions."""

    @property
    @abstractmethod
    def sender_address(self) -> str:
        """Bech32 address that signs transactions."""
        pass

    @abstractmethod
    async def execute(
        self,
        contract_address: str,
        msg: dict,
        funds: list["Coin"],
        memo: Optional[str] = None,
    ) -> ExecuteResult:
        """Execute a contract message, attaching funds.

        Returns:
            ExecuteResult once the transaction is included in a block
        """
        pass


def format_funds(funds: list["Coin"]) -> str:
    """Format coins as a Cosmos SDK coin string (e.g. "1000uom,5uusdc")."""
    return ",".join(f"{coin.amount}{coin.denom}" for coin in funds)
