"""API wrapper for the CommunityBuilder contract."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import parse_int_or_throw
from collective.chain.events import extract_field
from collective.chain.wallet import Wallet


class CommunityBuilder:
    """Fluent builder for a community class, the voter definition of a governance."""

    ABI_NAME = "CommunityBuilder.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "CommunityBuilder":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def name(self) -> str:
        return await self.binding.call("name")

    async def version(self) -> int:
        return parse_int_or_throw(await self.binding.call("version"))

    async def a_community(self) -> "CommunityBuilder":
        """Reset the community class builder for this sender."""
        self.logger.info("Community Builder Started")
        await self.binding.transact("aCommunity")
        return self

    async def as_open_community(self) -> "CommunityBuilder":
        self.logger.info("asOpenCommunity")
        await self.binding.transact("asOpenCommunity")
        return self

    async def as_pool_community(self) -> "CommunityBuilder":
        self.logger.info("asPoolCommunity")
        await self.binding.transact("asPoolCommunity")
        return self

    async def as_erc721_community(self, project: str) -> "CommunityBuilder":
        """Community of the holders of an ERC-721 token contract."""
        self.logger.info(f"asErc721Community {project}")
        await self.binding.transact("asErc721Community", project)
        return self

    async def as_closed_erc721_community(self, project: str, token_threshold: int) -> "CommunityBuilder":
        """ERC-721 community where proposing requires ``token_threshold`` tokens."""
        self.logger.info(f"asClosedErc721Community {project}, {token_threshold}")
        await self.binding.transact("asClosedErc721Community", project, token_threshold)
        return self

    async def with_voter(self, voter: str) -> "CommunityBuilder":
        """Append a voter to a pool community."""
        self.logger.info(f"withVoter {voter}")
        await self.binding.transact("withVoter", voter)
        return self

    async def with_weight(self, weight: int) -> "CommunityBuilder":
        self.logger.info(f"withWeight {weight}")
        await self.binding.transact("withWeight", weight)
        return self

    async def with_quorum(self, quorum: int) -> "CommunityBuilder":
        self.logger.info(f"withQuorum {quorum}")
        await self.binding.transact("withQuorum", quorum)
        return self

    async def with_minimum_vote_delay(self, delay: int) -> "CommunityBuilder":
        self.logger.info(f"withMinimumVoteDelay {delay}")
        await self.binding.transact("withMinimumVoteDelay", delay)
        return self

    async def with_maximum_vote_delay(self, delay: int) -> "CommunityBuilder":
        self.logger.info(f"withMaximumVoteDelay {delay}")
        await self.binding.transact("withMaximumVoteDelay", delay)
        return self

    async def with_minimum_vote_duration(self, duration: int) -> "CommunityBuilder":
        self.logger.info(f"withMinimumVoteDuration {duration}")
        await self.binding.transact("withMinimumVoteDuration", duration)
        return self

    async def with_maximum_vote_duration(self, duration: int) -> "CommunityBuilder":
        self.logger.info(f"withMaximumVoteDuration {duration}")
        await self.binding.transact("withMaximumVoteDuration", duration)
        return self

    async def build(self) -> str:
        """Build the community class and return its address."""
        self.logger.info("Building Community Class")
        outcome = await self.binding.transact("build")
        return extract_field(outcome, "CommunityClassCreated", "class")
