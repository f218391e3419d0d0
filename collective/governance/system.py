"""API wrapper for the governance System creator."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import encode_short_name
from collective.chain.wallet import Wallet


class System:
    """One call creation of a complete governance system.

    The created addresses are not returned; pass the transaction hash to
    ``GovernanceBuilder.discover_contract``.
    """

    ABI_NAME = "System.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "System":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def create(self, name: str, url: str, description: str, erc721_contract: str, quorum: int) -> str:
        """Create a governance for holders of an ERC-721 token.

        Returns:
            The transaction hash of the build
        """
        self.logger.info(f"Create Governance: {name}, {url}, {description}, {erc721_contract}, {quorum}")
        outcome = await self.binding.transact(
            "create", encode_short_name(name), url, description, erc721_contract, quorum
        )
        return outcome.transaction_hash

    async def create_with_delay(
        self,
        name: str,
        url: str,
        description: str,
        erc721_contract: str,
        quorum: int,
        delay: int,
        duration: int,
    ) -> str:
        """Like ``create`` with a required voting delay and duration in seconds."""
        self.logger.info(
            f"Create Governance: {name}, {url}, {description}, {erc721_contract}, {quorum}, {delay}, {duration}"
        )
        outcome = await self.binding.transact(
            "create", encode_short_name(name), url, description, erc721_contract, quorum, delay, duration
        )
        return outcome.transaction_hash
