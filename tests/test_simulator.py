"""Tests for swap simulation."""

import pytest

from mantradex.dex.models import Coin, SwapOperation, SwapRequest
from mantradex.errors import NoRouteError, QueryError
from tests.fakes import DEX_ADDRESS, make_pool


def swap_request(amount: int = 1_000_000, token_in="uom", token_out="usdc") -> SwapRequest:
    return SwapRequest(token_in=Coin(token_in, amount), token_out_denom=token_out)


class TestSwapSimulator:
    """Tests for best-route selection."""

    @pytest.mark.asyncio
    async def test_selects_highest_return(self, service, query_client):
        """Test the route with the largest projected return wins."""
        query_client.pools = [make_pool("A", ["uom", "usdc"]), make_pool("B", ["uom", "usdc"])]
        query_client.returns = {("A",): 100, ("B",): 120}

        result = await service.simulate_swap(swap_request())

        assert result.expected_return == 120
        assert result.route == [SwapOperation("B", "uom", "usdc")]

    @pytest.mark.asyncio
    async def test_tie_keeps_first_route(self, service, query_client):
        """Test equal returns keep the earlier route."""
        query_client.pools = [make_pool("A", ["uom", "usdc"]), make_pool("B", ["uom", "usdc"])]
        query_client.returns = {("A",): 500, ("B",): 500}

        result = await service.simulate_swap(swap_request())

        assert result.route[0].pool_identifier == "A"
        assert result.expected_return == 500

    @pytest.mark.asyncio
    async def test_all_zero_returns_first_route(self, service, query_client):
        """Test the first candidate is the starting best."""
        query_client.pools = [make_pool("A", ["uom", "usdc"]), make_pool("B", ["uom", "usdc"])]

        result = await service.simulate_swap(swap_request())

        assert result.route[0].pool_identifier == "A"
        assert result.expected_return == 0

    @pytest.mark.asyncio
    async def test_compares_as_integers(self, service, query_client):
        """Test returns differing beyond float precision are ranked correctly."""
        query_client.pools = [make_pool("A", ["uom", "usdc"]), make_pool("B", ["uom", "usdc"])]
        query_client.returns = {("A",): 10**30, ("B",): 10**30 + 1}

        result = await service.simulate_swap(swap_request(amount=10**31))

        assert result.route[0].pool_identifier == "B"
        assert result.expected_return == 10**30 + 1

    @pytest.mark.asyncio
    async def test_best_is_never_below_other_routes(self, service, query_client):
        """Test the chosen return is the maximum across all two-hop candidates."""
        query_client.pools = [
            make_pool("A", ["uom", "usdt", "atom"]),
            make_pool("B", ["usdt", "usdc"]),
            make_pool("C", ["atom", "usdc"]),
        ]
        query_client.returns = {("A", "B"): 900, ("A", "C"): 950}

        result = await service.simulate_swap(swap_request())

        assert result.expected_return == max(query_client.returns.values())
        assert [op.pool_identifier for op in result.route] == ["A", "C"]

    @pytest.mark.asyncio
    async def test_simulation_query_shape(self, service, query_client):
        """Test single-hop routes also use simulate_swap_operations."""
        query_client.pools = [make_pool("A", ["uom", "usdc"])]
        query_client.returns = {("A",): 990}

        await service.simulate_swap(swap_request(amount=12345))

        address, msg = query_client.queries[-1]
        assert address == DEX_ADDRESS
        assert msg == {
            "simulate_swap_operations": {
                "operations": [{
                    "mantra_swap": {
                        "pool_identifier": "A",
                        "token_in_denom": "uom",
                        "token_out_denom": "usdc",
                    }
                }],
                "offer_amount": "12345",
            }
        }

    @pytest.mark.asyncio
    async def test_one_simulation_per_route(self, service, query_client):
        """Test each candidate is simulated exactly once."""
        query_client.pools = [make_pool(p, ["uom", "usdc"]) for p in ("A", "B", "C")]

        await service.simulate_swap(swap_request())

        assert query_client.count("pools") == 1
        assert query_client.count("simulate_swap_operations") == 3

    @pytest.mark.asyncio
    async def test_no_route(self, service, query_client):
        """Test an empty pool list fails with NoRouteError."""
        query_client.pools = []

        with pytest.raises(NoRouteError) as exc_info:
            await service.simulate_swap(swap_request())

        assert exc_info.value.token_in == "uom"
        assert exc_info.value.token_out == "usdc"
        assert query_client.count("simulate_swap_operations") == 0

    @pytest.mark.asyncio
    async def test_malformed_simulation_response(self, service, query_client, monkeypatch):
        """Test a response without return_amount raises QueryError."""
        query_client.pools = [make_pool("A", ["uom", "usdc"])]
        original = query_client.query_contract_smart

        async def no_return_amount(address, msg):
            if "simulate_swap_operations" in msg:
                return {"spread_amount": "0"}
            return await original(address, msg)

        monkeypatch.setattr(query_client, "query_contract_smart", no_return_amount)

        with pytest.raises(QueryError, match="Failed to simulate swap"):
            await service.simulate_swap(swap_request())
