"""CosmWasm smart queries over the LCD (REST) endpoint."""

import base64
import json
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from mantradex.clients.base import ContractQueryClient
from mantradex.errors import QueryError

logger = logging.getLogger(__name__)


class LcdQueryClient(ContractQueryClient):
    """Query client for the cosmwasm/wasm/v1 REST routes."""

    def __init__(
        self,
        api_endpoint: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = api_endpoint.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @staticmethod
    def encode_query(msg: dict) -> str:
        """Encode a query message for the smart query path segment."""
        raw = json.dumps(msg, separators=(",", ":")).encode()
        return quote(base64.b64encode(raw).decode(), safe="")

    async def query_contract_smart(self, contract_address: str, msg: dict) -> dict:
        url = (
            f"{self.base_url}/cosmwasm/wasm/v1/contract/"
            f"{contract_address}/smart/{self.encode_query(msg)}"
        )
        logger.debug(f"Smart query {contract_address}: {json.dumps(msg)}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(url)

        if response.status_code != 200:
            raise QueryError(
                f"Contract query failed ({response.status_code}): {self._error_message(response)}"
            )

        payload = response.json()
        if "data" not in payload:
            raise QueryError(f"Unexpected query response: {payload}")
        return payload["data"]

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("message") or response.text
        except ValueError:
            return response.text
