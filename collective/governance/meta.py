"""API wrapper for the MetaStorage contract."""

from dataclasses import dataclass
from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import decode_short_name, parse_int_or_throw
from collective.chain.wallet import Wallet
from collective.errors import DecodingError


@dataclass(frozen=True)
class MetaEntry:
    """Named metadata stored on a proposal."""

    name: str
    value: str


class MetaStorage:
    """Community and proposal metadata."""

    ABI_NAME = "MetaStorage.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "MetaStorage":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def name(self) -> str:
        return await self.binding.call("name")

    async def version(self) -> int:
        return parse_int_or_throw(await self.binding.call("version"))

    async def community(self) -> str:
        """Get the community name."""
        return decode_short_name(await self.binding.call("community"))

    async def description(self) -> str:
        """Get the community description."""
        return await self.binding.call("description")

    async def url(self) -> str:
        """Get the community url."""
        return await self.binding.call("url")

    async def get_description(self, proposal_id: int) -> str:
        """Get the description of a proposal."""
        return await self.binding.call("description", proposal_id)

    async def get_url(self, proposal_id: int) -> str:
        """Get the url of a proposal."""
        return await self.binding.call("url", proposal_id)

    async def get(self, proposal_id: int, meta_id: int) -> MetaEntry:
        """Get one metadata entry of a proposal."""
        result = await self.binding.call("get", proposal_id, meta_id)
        try:
            name, value = result
        except (TypeError, ValueError) as e:
            raise DecodingError(f"Meta returned invalid data: {result!r}") from e
        return MetaEntry(name=decode_short_name(name), value=value)

    async def meta_count(self, proposal_id: int) -> int:
        """Number of metadata entries on a proposal."""
        return parse_int_or_throw(await self.binding.call("metaCount", proposal_id))
