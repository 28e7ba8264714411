"""Pool registry access: the full pool list from one contract query."""

import logging

from mantradex.dex.context import DexContext
from mantradex.dex.models import Pool
from mantradex.errors import DexError, QueryError

logger = logging.getLogger(__name__)


class PoolRegistry:
    """Fetches pool snapshots from the DEX contract.

    Nothing is cached: every call re-queries the contract.
    """

    def __init__(self, context: DexContext):
        self.context = context

    async def list_pools(self) -> list[Pool]:
        """Get all pools from the DEX.

        Raises:
            ConfigurationError: If the network has no DEX contract
            QueryError: If the query fails or the response is malformed
        """
        contract_address = self.context.dex_contract_address

        try:
            response = await self.context.query_client.query_contract_smart(
                contract_address, {"pools": {}}
            )
        except DexError:
            raise
        except Exception as e:
            logger.error(f"Pool query failed on {contract_address}: {e}")
            raise QueryError(f"Failed to get pools: {e}") from e

        try:
            pools = [Pool.from_dict(record) for record in response["pools"]]
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.error(f"Malformed pools response from {contract_address}: {e}")
            raise QueryError(f"Failed to parse pools: {e}") from e

        logger.debug(f"Fetched {len(pools)} pools from {self.context.network.name}")
        return pools
