from typing import Any

import httpx

from status_checker.chain.client_base import BaseChainClient
from status_checker.chain.exceptions import (
    ChainConnectionError,
    ChainError,
    ChainQueryError,
)
from status_checker.chain.models import OnchainRecord
from status_checker.chain.storage_codec import decode_file_info, files_v2_storage_key
from status_checker.logging.logger import Log

_SCHEME_MAP = {"ws://": "http://", "wss://": "https://"}


def normalize_address(address: str) -> str:
    """Strip trailing slashes and map websocket schemes to their HTTP form."""
    address = address.strip().rstrip("/")
    for ws_scheme, http_scheme in _SCHEME_MAP.items():
        if address.startswith(ws_scheme):
            return http_scheme + address[len(ws_scheme) :]
    return address


class CrustHttpClientAdapter(BaseChainClient):
    """Crust chain client speaking Substrate JSON-RPC over HTTP."""

    def __init__(
        self,
        *,
        address: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._address = normalize_address(address)
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_id = 0

    @property
    def address(self) -> str:
        return self._address

    async def connect(self) -> None:
        self._client = httpx.AsyncClient(
            timeout=self._timeout_seconds,
            transport=self._transport,
        )
        try:
            chain = await self._request("system_chain")
        except ChainError as exc:
            raise ChainConnectionError(
                f"Cannot connect to {self._address}: {exc}"
            ) from exc
        Log.info(f"Connected to {chain} at {self._address}")

    async def get_current_height(self) -> int:
        try:
            header = await self._request("chain_getHeader")
            return int(header["number"], 16)
        except ChainError as exc:
            raise ChainConnectionError(f"Cannot fetch current block height: {exc}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise ChainConnectionError(f"Malformed block header: {header!r}") from exc

    async def query_file(self, cid: str) -> OnchainRecord:
        value = await self._request("state_getStorage", [files_v2_storage_key(cid)])
        if value is not None and not isinstance(value, str):
            raise ChainQueryError(f"Unexpected storage value for {cid}: {value!r}")
        return decode_file_info(value)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, params: list[Any] | None = None) -> Any:
        if self._client is None:
            raise ChainQueryError("Client is not connected; call connect() first")
        payload = {
            "jsonrpc": "2.0",
            "id": self._next_id(),
            "method": method,
            "params": params or [],
        }
        Log.debug(f"RPC request -> {method} {payload['params']}")
        try:
            response = await self._client.post(self._address, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise ChainQueryError(
                f"HTTP {exc.response.status_code} on {method}"
            ) from exc
        except (httpx.RequestError, ValueError) as exc:
            raise ChainQueryError(f"Request error on {method}: {exc}") from exc

        if not isinstance(data, dict):
            raise ChainQueryError(f"Malformed RPC response on {method}")
        if "error" in data:
            error = data["error"] or {}
            message = error.get("message", "Unknown RPC error") if isinstance(error, dict) else error
            raise ChainQueryError(f"RPC error on {method}: {message}")
        return data.get("result")

    def _next_id(self) -> int:
        self._request_id += 1
        return self._request_id
