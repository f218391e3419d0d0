"""API wrapper for the VoterClassFactory contract."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.events import extract_field
from collective.chain.wallet import Wallet


class VoterClassFactory:
    ABI_NAME = "VoterClassFactory.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "VoterClassFactory":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def create_erc721(self, project_address: str, weight: int) -> str:
        """Create a voter class for holders of an ERC-721 token, returning its address."""
        self.logger.debug(f"Sending createERC721 to {project_address}")
        outcome = await self.binding.transact("createERC721", project_address, weight)
        return extract_field(outcome, "VoterClassCreated", "voterClass")
