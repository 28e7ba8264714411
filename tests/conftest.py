"""Pytest configuration and fixtures."""

import os
from dataclasses import replace

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["WALLET_MNEMONIC"] = ""
os.environ["DEBUG"] = "false"
os.environ.pop("CUSTOM_NETWORKS", None)

from mantradex.dex.context import DexContext
from mantradex.dex.service import DexService
from mantradex.networks import NETWORKS
from tests.fakes import FakeQueryClient, FakeSigningClient


@pytest.fixture
def network():
    """Testnet network config (a copy, safe to mutate)."""
    return replace(NETWORKS["mantra-dukong-1"])


@pytest.fixture
def query_client():
    return FakeQueryClient()


@pytest.fixture
def signing_client():
    return FakeSigningClient()


@pytest.fixture
def context(network, query_client, signing_client) -> DexContext:
    return DexContext(network=network, query_client=query_client, signing_client=signing_client)


@pytest.fixture
def service(context) -> DexService:
    return DexService(context)
