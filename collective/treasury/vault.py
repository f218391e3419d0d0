"""API wrapper for the treasury Vault contract."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import parse_int_or_throw
from collective.chain.wallet import Wallet


class Treasury:
    """Treasury holding funds released by approval."""

    ABI_NAME = "Vault.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "Treasury":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def deposit(self, quantity: int) -> None:
        """Send ``quantity`` wei to the treasury."""
        self.logger.info(f"deposit({quantity})")
        await self.binding.transact("deposit", value=quantity)

    async def approve(self, to: str, quantity: int) -> None:
        """Approve a withdrawal of ``quantity`` wei for ``to``."""
        self.logger.info(f"approve({to}, {quantity})")
        await self.binding.transact("approve", to, quantity)

    async def approve_multi(self, to: str, quantity: int, schedule_time: int, signatures: list[str]) -> None:
        """Approve and sign a withdrawal in a single transaction.

        Args:
            to: Recipient of the funds
            quantity: Amount to approve in wei
            schedule_time: Time the withdrawal is scheduled for
            signatures: Approver signatures, see ``collective.treasury.signature``
        """
        self.logger.info(f"approveMulti({to}, {quantity}, {schedule_time}, {signatures})")
        await self.binding.transact("approveMulti", to, quantity, schedule_time, signatures)

    async def pay(self) -> None:
        """Withdraw the funds approved for the sender."""
        self.logger.info("pay()")
        await self.binding.transact("pay")

    async def transfer_to(self, to: str) -> None:
        """Withdraw the funds approved for the sender to ``to``."""
        self.logger.info(f"transferTo({to})")
        await self.binding.transact("transferTo", to)

    async def cancel(self, to: str) -> None:
        """Cancel the approval for ``to``."""
        self.logger.info(f"cancel({to})")
        await self.binding.transact("cancel", to)

    async def balance(self, account: str) -> int:
        """Approved balance of ``account``."""
        self.logger.info(f"balance({account})")
        return parse_int_or_throw(await self.binding.call("balance", account))

    async def treasury_balance(self) -> int:
        """Total balance held by the treasury."""
        self.logger.info("balance()")
        return parse_int_or_throw(await self.binding.call("balance"))
