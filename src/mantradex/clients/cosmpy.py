"""Signing client backed by cosmpy.

The key is derived from a BIP39 mnemonic on the Cosmos BIP44 path
(m/44'/118'/0'/0/index) with bip_utils.
"""

import asyncio
import logging
from typing import Optional

from bip_utils import Bip39SeedGenerator, Bip44, Bip44Changes, Bip44Coins
from cosmpy.aerial.client import LedgerClient
from cosmpy.aerial.client import NetworkConfig as LedgerNetworkConfig
from cosmpy.aerial.client.utils import prepare_and_broadcast_basic_transaction
from cosmpy.aerial.contract.cosmwasm import create_cosmwasm_execute_msg
from cosmpy.aerial.exceptions import BroadcastError
from cosmpy.aerial.tx import Transaction
from cosmpy.aerial.wallet import LocalWallet
from cosmpy.crypto.address import Address
from cosmpy.crypto.keypairs import PrivateKey

from mantradex.clients.base import ContractSigningClient, ExecuteResult, format_funds
from mantradex.dex.models import Coin
from mantradex.errors import ExecutionError
from mantradex.networks import NetworkConfig

logger = logging.getLogger(__name__)


def derive_private_key(mnemonic: str, index: int = 0) -> bytes:
    """Get private key bytes for a mnemonic at the given address index."""
    seed = Bip39SeedGenerator(mnemonic).Generate()
    bip44 = Bip44.FromSeed(seed, Bip44Coins.COSMOS)
    account = bip44.Purpose().Coin().Account(0).Change(Bip44Changes.CHAIN_EXT)
    return account.AddressIndex(index).PrivateKey().Raw().ToBytes()


class CosmpySigningClient(ContractSigningClient):
    """Broadcasts MsgExecuteContract transactions through cosmpy."""

    def __init__(self, ledger: LedgerClient, wallet: LocalWallet, gas_limit: Optional[int] = None):
        self.ledger = ledger
        self.wallet = wallet
        self.gas_limit = gas_limit

    @classmethod
    def from_mnemonic(
        cls,
        mnemonic: str,
        network: NetworkConfig,
        index: int = 0,
    ) -> "CosmpySigningClient":
        cfg = LedgerNetworkConfig(
            chain_id=network.chain_id,
            url=f"rest+{network.api_endpoint}",
            fee_minimum_gas_price=float(network.gas_price),
            fee_denomination=network.denom,
            staking_denomination=network.denom,
        )
        wallet = LocalWallet(PrivateKey(derive_private_key(mnemonic, index)), prefix=network.prefix)
        logger.info(f"Signing client ready on {network.chain_id} for {wallet.address()}")
        return cls(LedgerClient(cfg), wallet)

    @property
    def sender_address(self) -> str:
        return str(self.wallet.address())

    async def execute(
        self,
        contract_address: str,
        msg: dict,
        funds: list[Coin],
        memo: Optional[str] = None,
    ) -> ExecuteResult:
        # cosmpy is synchronous
        return await asyncio.to_thread(self._execute, contract_address, msg, funds, memo)

    def _execute(
        self,
        contract_address: str,
        msg: dict,
        funds: list[Coin],
        memo: Optional[str],
    ) -> ExecuteResult:
        tx = Transaction()
        tx.add_message(
            create_cosmwasm_execute_msg(
                self.wallet.address(),
                Address(contract_address),
                msg,
                funds=format_funds(funds) or None,
            )
        )

        submitted = prepare_and_broadcast_basic_transaction(
            self.ledger, tx, self.wallet, gas_limit=self.gas_limit, memo=memo
        )
        logger.info(f"Broadcast execute on {contract_address}: {submitted.tx_hash}")
        try:
            # Raises BroadcastError on a non-zero result code
            submitted.wait_to_complete()
        except BroadcastError as e:
            raise ExecutionError(f"Transaction {submitted.tx_hash} failed: {e}") from e
        response = submitted.response

        return ExecuteResult(
            transaction_hash=response.hash,
            code=response.code,
            gas_used=response.gas_used,
            gas_wanted=response.gas_wanted,
            raw_log=response.raw_log or "",
        )
