"""Swap execution: build the contract message for the best route and submit it.

Single-hop and multi-hop swaps use different contract entry points:

    swap                      no minimum_receive, protected by max_spread only
    execute_swap_operations   max_spread plus an explicit minimum_receive floor
"""

import logging
from decimal import Decimal
from typing import Optional

from mantradex.dex.context import DexContext
from mantradex.dex.models import (
    DEFAULT_SLIPPAGE,
    Route,
    SwapRequest,
    TransactionOutcome,
    route_to_msg,
)
from mantradex.dex.simulator import SwapSimulator
from mantradex.errors import DexError, ExecutionError

logger = logging.getLogger(__name__)


def minimum_receive(expected_return: int, slippage: Decimal) -> int:
    """floor(expected_return * (100 - slippage) / 100), computed exactly."""
    num, den = slippage.as_integer_ratio()
    return expected_return * (100 * den - num) // (100 * den)


def max_spread(slippage: Decimal) -> str:
    """Slippage percent as the contract's max_spread fraction ("1" -> "0.01")."""
    return format((slippage / 100).normalize(), "f")


def build_swap_message(
    route: Route,
    token_out_denom: str,
    slippage: Decimal,
    min_receive: int,
) -> dict:
    """Build the execute message for a route.

    min_receive is only carried by the multi-hop message.
    """
    if not route:
        raise ValueError("Cannot build a swap message for an empty route")
    if min_receive < 0:
        raise ValueError("minimum_receive must not be negative")

    spread = max_spread(slippage)

    if len(route) == 1:
        return {
            "swap": {
                "ask_asset_denom": token_out_denom,
                "belief_price": None,
                "max_spread": spread,
                "pool_identifier": route[0].pool_identifier,
                "receiver": None,
            }
        }

    return {
        "execute_swap_operations": {
            "max_spread": spread,
            "minimum_receive": str(min_receive),
            "operations": route_to_msg(route),
            "receiver": None,
        }
    }


class SwapExecutor:
    """Commits the best simulated route on-chain."""

    def __init__(
        self,
        context: DexContext,
        simulator: SwapSimulator,
        default_slippage: Optional[Decimal] = None,
    ):
        self.context = context
        self.simulator = simulator
        self.default_slippage = default_slippage if default_slippage is not None else DEFAULT_SLIPPAGE

    async def swap(self, request: SwapRequest) -> TransactionOutcome:
        """Simulate, then execute the best route with slippage protection.

        Raises:
            ConfigurationError: If no DEX contract or signing wallet is configured
            NoRouteError: If the denoms are not connected
            QueryError: If route discovery or simulation fails
            ExecutionError: If the transaction fails
        """
        signing_client = self.context.require_signing_client()
        contract_address = self.context.dex_contract_address

        simulation = await self.simulator.simulate(request)

        slippage = request.slippage if request.slippage is not None else self.default_slippage
        min_receive = minimum_receive(simulation.expected_return, slippage)
        msg = build_swap_message(simulation.route, request.token_out_denom, slippage, min_receive)

        sender = signing_client.sender_address
        logger.info(
            f"Executing swap for {sender}: {request.token_in.amount} {request.token_in.denom} -> "
            f"{request.token_out_denom} via {len(simulation.route)} hop(s), "
            f"expected {simulation.expected_return}, minimum {min_receive}"
        )

        try:
            result = await signing_client.execute(
                contract_address, msg, [request.token_in], request.memo
            )
        except DexError:
            raise
        except Exception as e:
            logger.error(f"Swap execution failed: {e}")
            raise ExecutionError(f"Failed to execute swap: {e}") from e

        logger.info(f"Swap submitted: {result.transaction_hash} (gas {result.gas_used}/{result.gas_wanted})")

        return TransactionOutcome(
            transaction_hash=result.transaction_hash,
            explorer_url=self.context.network.tx_explorer_url(result.transaction_hash),
            success=result.success,
            gas_used=result.gas_used,
            gas_wanted=result.gas_wanted,
            extra={
                "sender": sender,
                "expected_return": str(simulation.expected_return),
                "minimum_receive": str(min_receive),
            },
        )
