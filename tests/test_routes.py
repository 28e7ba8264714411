"""Tests for route discovery."""

import pytest

from mantradex.dex.models import Pool, SwapOperation, is_contiguous
from mantradex.dex.routes import find_routes
from tests.fakes import make_pool


def pools_of(*records) -> list[Pool]:
    return [Pool.from_dict(r) for r in records]


class TestFindRoutes:
    """Tests for the pure route search."""

    def test_direct_route(self):
        """Test a single pool holding both denoms gives a single-hop route."""
        pools = pools_of(make_pool("A", ["uom", "usdc"]))

        routes = find_routes(pools, "uom", "usdc")

        assert routes == [[SwapOperation("A", "uom", "usdc")]]

    def test_two_hop_route(self):
        """Test denoms connected through an intermediate give a two-hop route."""
        pools = pools_of(
            make_pool("A", ["uom", "usdt"]),
            make_pool("B", ["usdt", "usdc"]),
        )

        routes = find_routes(pools, "uom", "usdc")

        assert routes == [[
            SwapOperation("A", "uom", "usdt"),
            SwapOperation("B", "usdt", "usdc"),
        ]]

    def test_empty_pool_list(self):
        """Test no pools means no routes."""
        assert find_routes([], "uom", "usdc") == []

    def test_unconnected_denoms(self):
        """Test denoms more than two hops apart are not routed."""
        pools = pools_of(
            make_pool("A", ["uom", "usdt"]),
            make_pool("B", ["usdt", "atom"]),
            make_pool("C", ["atom", "usdc"]),
        )

        assert find_routes(pools, "uom", "usdc") == []

    def test_multiple_direct_pools_all_returned(self):
        """Test duplicate direct pools are kept for ranking."""
        pools = pools_of(
            make_pool("A", ["uom", "usdc"]),
            make_pool("B", ["usdc", "uom"]),
        )

        routes = find_routes(pools, "uom", "usdc")

        assert [r[0].pool_identifier for r in routes] == ["A", "B"]
        assert all(len(r) == 1 for r in routes)

    def test_direct_routes_suppress_two_hop(self):
        """Test no two-hop routes appear when a direct route exists."""
        pools = pools_of(
            make_pool("A", ["uom", "usdt"]),
            make_pool("B", ["usdt", "usdc"]),
            make_pool("C", ["uom", "usdc"]),
        )

        routes = find_routes(pools, "uom", "usdc")

        assert routes == [[SwapOperation("C", "uom", "usdc")]]

    def test_two_hop_through_every_intermediate(self):
        """Test each (in pool, intermediate, out pool) triple yields a route."""
        pools = pools_of(
            make_pool("A", ["uom", "usdt", "atom"]),
            make_pool("B", ["usdt", "usdc"]),
            make_pool("C", ["atom", "usdc"]),
        )

        routes = find_routes(pools, "uom", "usdc")

        assert [[op.pool_identifier for op in r] for r in routes] == [["A", "B"], ["A", "C"]]
        assert routes[0][0].token_out_denom == "usdt"
        assert routes[1][0].token_out_denom == "atom"

    def test_repeated_pool_pair_not_deduplicated(self):
        """Test the same pool pair reached via two intermediates appears twice."""
        pools = pools_of(
            make_pool("A", ["uom", "usdt", "atom"]),
            make_pool("B", ["usdt", "atom", "usdc"]),
        )

        routes = find_routes(pools, "uom", "usdc")

        assert len(routes) == 2
        assert {r[0].token_out_denom for r in routes} == {"usdt", "atom"}
        assert all([op.pool_identifier for op in r] == ["A", "B"] for r in routes)

    def test_stable_swap_pools_are_routed(self):
        """Test pool type does not affect routing."""
        pools = pools_of(
            make_pool("S", ["usdt", "usdc"], pool_type={"stable_swap": {"amp": 100}}),
        )

        assert find_routes(pools, "usdt", "usdc") == [[SwapOperation("S", "usdt", "usdc")]]

    def test_same_denom_is_not_short_circuited(self):
        """Test token_in == token_out falls through to the normal filters."""
        pools = pools_of(make_pool("A", ["uom", "usdc"]))

        routes = find_routes(pools, "uom", "uom")

        assert routes == [[SwapOperation("A", "uom", "uom")]]

    @pytest.mark.parametrize("token_in,token_out", [("uom", "usdc"), ("usdc", "uom"), ("uom", "atom")])
    def test_routes_are_contiguous(self, token_in, token_out):
        """Test every discovered route chains hop outputs to hop inputs."""
        pools = pools_of(
            make_pool("A", ["uom", "usdt"]),
            make_pool("B", ["usdt", "usdc", "atom"]),
            make_pool("C", ["usdc", "uom"]),
        )

        routes = find_routes(pools, token_in, token_out)

        assert routes
        for route in routes:
            assert is_contiguous(route)
            assert route[0].token_in_denom == token_in
            assert route[-1].token_out_denom == token_out


class TestRouteFinder:
    """Tests for route discovery against the contract."""

    @pytest.mark.asyncio
    async def test_refetches_pools_every_call(self, service, query_client):
        """Test pools are never cached between calls."""
        query_client.pools = [make_pool("A", ["uom", "usdc"])]

        first = await service.find_routes("uom", "usdc")
        query_client.pools = [make_pool("B", ["uom", "usdc"])]
        second = await service.find_routes("uom", "usdc")

        assert first[0][0].pool_identifier == "A"
        assert second[0][0].pool_identifier == "B"
        assert query_client.count("pools") == 2
