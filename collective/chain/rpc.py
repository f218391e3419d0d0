"""RPC client for blockchain interaction."""

from typing import Any

from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.exceptions import Web3Exception

from collective.config import settings
from collective.errors import ConfigurationError, RemoteError


class RPCClient:
    """Async RPC connection shared by contract bindings."""

    def __init__(self, rpc_url: str | None = None, timeout: float = 30.0):
        self.rpc_url = rpc_url or settings.rpc_url
        if not self.rpc_url:
            raise ConfigurationError("RPC URL not configured (COLLECTIVE_RPC_URL)")

        self.w3 = AsyncWeb3(
            AsyncHTTPProvider(self.rpc_url, request_kwargs={"timeout": timeout})
        )

    async def close(self) -> None:
        """Close the provider session."""
        await self.w3.provider.disconnect()

    async def __aenter__(self) -> "RPCClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def get_chain_id(self) -> int:
        try:
            return await self.w3.eth.chain_id
        except (Web3Exception, ValueError, OSError) as e:
            raise RemoteError(f"Unable to read chain id: {e}") from e

    async def get_block_number(self) -> int:
        """Get latest block number."""
        try:
            return await self.w3.eth.block_number
        except (Web3Exception, ValueError, OSError) as e:
            raise RemoteError(f"Unable to read block number: {e}") from e

    async def get_balance(self, address: str) -> int:
        """Get native balance in wei."""
        try:
            return await self.w3.eth.get_balance(self.w3.to_checksum_address(address))
        except (Web3Exception, ValueError, OSError) as e:
            raise RemoteError(f"Unable to read balance of {address}: {e}") from e
