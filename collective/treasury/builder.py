"""API wrapper for the TreasuryBuilder contract."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.events import extract_field
from collective.chain.wallet import Wallet


class TreasuryBuilder:
    """Fluent builder for a multi-approver treasury."""

    ABI_NAME = "TreasuryBuilder.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "TreasuryBuilder":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def name(self) -> str:
        self.logger.debug("name()")
        return await self.binding.call("name")

    async def a_treasury(self) -> "TreasuryBuilder":
        self.logger.info("aTreasury()")
        await self.binding.transact("aTreasury")
        return self

    async def with_minimum_approval_requirement(self, requirement: int) -> "TreasuryBuilder":
        """Set the number of approvals required to execute a transaction."""
        self.logger.info(f"withMinimumApprovalRequirement({requirement})")
        await self.binding.transact("withMinimumApprovalRequirement", requirement)
        return self

    async def with_time_lock_delay(self, delay: int) -> "TreasuryBuilder":
        """Set the timelock delay in seconds."""
        self.logger.info(f"withTimeLockDelay({delay})")
        await self.binding.transact("withTimeLockDelay", delay)
        return self

    async def with_approver(self, approver: str) -> "TreasuryBuilder":
        self.logger.info(f"withApprover({approver})")
        await self.binding.transact("withApprover", approver)
        return self

    async def build(self) -> str:
        """Build the treasury and return its address."""
        self.logger.info("build()")
        outcome = await self.binding.transact("build")
        return extract_field(outcome, "TreasuryCreated", "treasury")
