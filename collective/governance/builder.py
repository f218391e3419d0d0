"""API wrapper for the GovernanceBuilder contract."""

from dataclasses import dataclass
from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import encode_short_name, parse_int_or_throw
from collective.chain.events import ContractEvent, TransactionOutcome, event_field, extract_field, find_event
from collective.chain.wallet import Wallet
from collective.errors import RemoteError

CREATED_EVENT = "GovernanceContractCreated"


@dataclass(frozen=True)
class ContractAddress:
    """Addresses of a governance system built in one transaction."""

    governance: str
    storage: str
    meta: str
    timelock: str


class GovernanceBuilder:
    """Fluent builder for a governance contract suite."""

    ABI_NAME = "GovernanceBuilder.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "GovernanceBuilder":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    @property
    def contract_address(self) -> str:
        return self.binding.contract_address

    async def name(self) -> str:
        """Get the contract name."""
        return await self.binding.call("name")

    async def version(self) -> int:
        """Get the contract version."""
        return parse_int_or_throw(await self.binding.call("version"))

    async def a_governance(self) -> "GovernanceBuilder":
        """Reset the builder to its default state."""
        self.logger.info("aGovernance()")
        await self.binding.transact("aGovernance")
        return self

    async def with_name(self, name: str) -> "GovernanceBuilder":
        """Set the community name, at most 32 bytes."""
        self.logger.info(f"withName {name}")
        await self.binding.transact("withName", encode_short_name(name))
        return self

    async def with_url(self, url: str) -> "GovernanceBuilder":
        self.logger.info(f"withUrl {url}")
        await self.binding.transact("withUrl", url)
        return self

    async def with_description(self, desc: str) -> "GovernanceBuilder":
        self.logger.info(f"withDescription {desc}")
        await self.binding.transact("withDescription", desc)
        return self

    async def with_supervisor(self, supervisor: str) -> "GovernanceBuilder":
        """Add a supervisor. May be called more than once; each supervisor is added."""
        self.logger.info(f"withSupervisor {supervisor}")
        await self.binding.transact("withSupervisor", supervisor)
        return self

    async def with_community_class_address(self, community_class: str) -> "GovernanceBuilder":
        """Set the address of the CommunityClass contract that defines the voters."""
        self.logger.info(f"withCommunityClassAddress {community_class}")
        await self.binding.transact("withCommunityClassAddress", community_class)
        return self

    async def with_minimum_duration(self, duration: int) -> "GovernanceBuilder":
        """Set the minimum voting duration in seconds."""
        self.logger.info(f"withMinimumDuration {duration}")
        await self.binding.transact("withMinimumDuration", duration)
        return self

    async def _build(self) -> TransactionOutcome:
        self.logger.info("Building Governance")
        return await self.binding.transact("build")

    async def build(self) -> str:
        """Build the governance contract.

        Returns:
            Address of the new governance contract
        """
        outcome = await self._build()
        return extract_field(outcome, CREATED_EVENT, "governance")

    async def build_contracts(self) -> ContractAddress:
        """Build and return every address created by the build."""
        outcome = await self._build()
        return _contract_address(find_event(outcome, CREATED_EVENT))

    async def discover_contract(self, tx_hash: str) -> ContractAddress:
        """Discover the contract suite built by an earlier transaction.

        Args:
            tx_hash: Hash of the transaction bearing the build call

        Returns:
            The set of contracts constructed by the build
        """
        tx = await self.binding.get_transaction(tx_hash)
        block_number = tx.get("blockNumber")
        if block_number is None:
            raise RemoteError(f"Block not known for transaction {tx_hash}")

        events = await self.binding.past_events(CREATED_EVENT, block_number, block_number)
        events = [e for e in events if e.transaction_hash is None or e.transaction_hash.lower() == tx_hash.lower()]
        addresses = _contract_address(find_event(events, CREATED_EVENT))
        self.logger.info(
            f"Found governance: {addresses.governance}, storage: {addresses.storage}, "
            f"meta: {addresses.meta}, timelock: {addresses.timelock}"
        )
        return addresses


def _contract_address(event: ContractEvent) -> ContractAddress:
    return ContractAddress(
        governance=event_field(event, "governance"),
        storage=event_field(event, "_storage"),
        meta=event_field(event, "metaStorage"),
        timelock=event_field(event, "timeLock"),
    )
