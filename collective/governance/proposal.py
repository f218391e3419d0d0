"""API wrapper for the ProposalBuilder contract."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import encode_short_name, parse_int_or_throw
from collective.chain.events import extract_field
from collective.chain.wallet import Wallet


class ProposalBuilder:
    """Fluent builder for a governance proposal."""

    ABI_NAME = "ProposalBuilder.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "ProposalBuilder":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def name(self) -> str:
        return await self.binding.call("name")

    async def version(self) -> int:
        return parse_int_or_throw(await self.binding.call("version"))

    async def a_proposal(self) -> "ProposalBuilder":
        """Reset the proposal builder for this sender."""
        self.logger.info("Proposal Builder Started")
        await self.binding.transact("aProposal")
        return self

    async def with_choice(self, name: str, description: str, transaction_id: int) -> "ProposalBuilder":
        """Add a choice to the proposal.

        Args:
            name: Choice name, at most 32 bytes
            description: Choice description
            transaction_id: Attached transaction to execute if the choice wins
        """
        self.logger.info(f"withChoice {name}, {description}, {transaction_id}")
        await self.binding.transact("withChoice", encode_short_name(name), description, transaction_id)
        return self

    async def with_transaction(
        self,
        target: str,
        value: int,
        signature: str,
        calldata: bytes,
        schedule_time: int,
    ) -> "ProposalBuilder":
        """Attach a transaction to execute if the proposal passes.

        Args:
            target: Address to call
            value: Amount of wei to send
            signature: Function signature of the call
            calldata: ABI encoded arguments
            schedule_time: Earliest execution time, epoch seconds
        """
        self.logger.info(f"withTransaction {target}, {value}, {signature}, {calldata!r}, {schedule_time}")
        await self.binding.transact("withTransaction", target, value, signature, calldata, schedule_time)
        return self

    async def with_description(self, description: str, url: str) -> "ProposalBuilder":
        self.logger.info(f"withDescription {description}, {url}")
        await self.binding.transact("withDescription", description, url)
        return self

    async def with_meta(self, name: str, value: str) -> "ProposalBuilder":
        """Attach a named metadata value; the name is limited to 32 bytes."""
        self.logger.info(f"withMeta {name}, {value}")
        await self.binding.transact("withMeta", encode_short_name(name), value)
        return self

    async def with_quorum(self, quorum: int) -> "ProposalBuilder":
        self.logger.info(f"withQuorum {quorum}")
        await self.binding.transact("withQuorum", quorum)
        return self

    async def with_delay(self, delay: int) -> "ProposalBuilder":
        """Set the delay in seconds before voting starts."""
        self.logger.info(f"withDelay {delay}")
        await self.binding.transact("withDelay", delay)
        return self

    async def with_duration(self, duration: int) -> "ProposalBuilder":
        """Set the voting duration in seconds."""
        self.logger.info(f"withDuration {duration}")
        await self.binding.transact("withDuration", duration)
        return self

    async def build(self) -> int:
        """Build the proposal and return its id."""
        self.logger.info("Building Proposal")
        outcome = await self.binding.transact("build")
        return parse_int_or_throw(extract_field(outcome, "ProposalBuild", "proposalId"))
