"""
AddressRpcClient - Client for the utils_convertAddress RPC method
"""

import itertools
from typing import Any, Optional

import httpx

from addrconv.exceptions import RpcError
from addrconv.types import RpcRequest, RpcResponse


class AddressRpcClient:
    """
    Client for a JSON-RPC endpoint serving the ``utils`` namespace.

    Usage:
        async with AddressRpcClient("http://localhost:8545") as client:
            bech32_address = await client.convert_address("0x...")
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[dict[str, str]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize RPC client.

        Args:
            base_url: RPC endpoint URL
            headers: Custom HTTP headers (e.g., Authorization)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g., ASGITransport)
        """
        self._base_url = base_url.rstrip("/")
        self._headers = headers or {}
        self._timeout = timeout
        self._transport = transport
        self._ids = itertools.count(1)
        self._http_client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "AddressRpcClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client"""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def call(self, method: str, params: list[Any] | dict[str, Any]) -> Any:
        """
        Invoke a JSON-RPC method and return its result.

        Raises:
            RpcError: If the server answers with an error object
            httpx.HTTPStatusError: On a non-2xx HTTP status
        """
        client = await self._get_client()
        request = RpcRequest(jsonrpc="2.0", method=method, params=params, id=next(self._ids))

        response = await client.post("/", json=request.model_dump())
        response.raise_for_status()

        rpc_response = RpcResponse(**response.json())
        if rpc_response.error is not None:
            error = rpc_response.error
            raise RpcError(error.code, error.message, error.data)
        return rpc_response.result

    async def convert_address(self, address: str) -> str:
        """
        Convert a hex address to bech32 or a bech32 address to hex.

        Args:
            address: Address in either encoding

        Returns:
            Address in the other encoding
        """
        return await self.call("utils_convertAddress", [address])
