"""Contract binding: an ABI bound to a deployed address and a signer."""

import logging
from pathlib import Path
from typing import Any

from web3 import Web3
from web3.exceptions import Web3Exception

from collective.chain.abi import abi_loader
from collective.chain.events import ContractEvent, TransactionOutcome, decode_receipt_events
from collective.chain.wallet import Wallet
from collective.config import settings
from collective.errors import ConfigurationError, RemoteError

# web3 raises ValueError for node side rejections and OSError subclasses for
# connection failures
TRANSPORT_ERRORS = (Web3Exception, ValueError, OSError)


class ContractBinding:
    """Callable proxy to a deployed contract."""

    def __init__(
        self,
        abi: list[dict[str, Any]],
        contract_address: str,
        web3: Any,
        wallet: Wallet | None,
        gas: int | None = None,
        gas_price_gwei: str | None = None,
        receipt_timeout: int | None = None,
        poll_latency: float | None = None,
        logger: logging.Logger | None = None,
    ):
        if not Web3.is_address(contract_address):
            raise ConfigurationError(f"Invalid contract address: {contract_address!r}")

        self.abi = abi
        self.contract_address = Web3.to_checksum_address(contract_address)
        self.web3 = web3
        self.wallet = wallet
        self.gas = gas or settings.gas
        self.gas_price = Web3.to_wei(gas_price_gwei or settings.gas_price_gwei, "gwei")
        self.receipt_timeout = receipt_timeout or settings.receipt_timeout
        self.poll_latency = poll_latency or settings.poll_latency
        self.logger = logger or logging.getLogger(__name__)

        self.contract = web3.eth.contract(address=self.contract_address, abi=abi)
        self.event_names = abi_loader.get_event_names(abi)
        self.logger.info(f"Connected to contract at {self.contract_address}")

    def _function(self, method: str, *args: Any) -> Any:
        if not abi_loader.get_functions(self.abi, method):
            raise ConfigurationError(f"Function {method} not found in ABI for {self.contract_address}")
        return getattr(self.contract.functions, method)(*args)

    async def call(self, method: str, *args: Any) -> Any:
        """Read a value with ``eth_call``."""
        fn = self._function(method, *args)
        params = {"from": self.wallet.address} if self.wallet is not None else {}
        try:
            result = await fn.call(params)
        except TRANSPORT_ERRORS as e:
            raise RemoteError(f"{method} call failed: {e}") from e
        self.logger.debug(f"{method}{args} -> {result}")
        return result

    async def transact(self, method: str, *args: Any, value: int = 0) -> TransactionOutcome:
        """Sign and send a transaction, then wait for it to be mined."""
        if self.wallet is None:
            raise ConfigurationError(f"A wallet is required to send {method}")
        fn = self._function(method, *args)
        self.logger.info(f"Sending {method}{args} to {self.contract_address}")
        try:
            nonce = await self.web3.eth.get_transaction_count(self.wallet.address)
            tx = await fn.build_transaction({
                "from": self.wallet.address,
                "gas": self.gas,
                "gasPrice": self.gas_price,
                "nonce": nonce,
                "value": value,
            })
            tx_hash = await self.web3.eth.send_raw_transaction(self.wallet.sign_transaction(tx))
            receipt = await self.web3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.receipt_timeout,
                poll_latency=self.poll_latency,
            )
        except TRANSPORT_ERRORS as e:
            raise RemoteError(f"{method} transaction failed: {e}") from e

        outcome = TransactionOutcome(
            transaction_hash=Web3.to_hex(receipt["transactionHash"]),
            block_number=receipt.get("blockNumber"),
            status=receipt["status"],
            events=decode_receipt_events(self.contract, self.event_names, receipt),
        )
        self.logger.debug(outcome)

        if not outcome.success:
            raise RemoteError(f"{method} transaction {outcome.transaction_hash} reverted")
        return outcome

    async def past_events(
        self,
        event_name: str,
        from_block: int | str = "earliest",
        to_block: int | str = "latest",
    ) -> list[ContractEvent]:
        """Query historical events of one kind."""
        if abi_loader.get_event(self.abi, event_name) is None:
            raise ConfigurationError(f"Event {event_name} not found in ABI for {self.contract_address}")

        event = getattr(self.contract.events, event_name)
        try:
            logs = await event.get_logs(from_block=from_block, to_block=to_block)
        except TRANSPORT_ERRORS as e:
            raise RemoteError(f"{event_name} query failed: {e}") from e
        return [ContractEvent.from_log(log) for log in logs]

    async def get_transaction(self, tx_hash: str) -> Any:
        """Fetch a transaction by hash."""
        try:
            return await self.web3.eth.get_transaction(tx_hash)
        except TRANSPORT_ERRORS as e:
            raise RemoteError(f"Transaction {tx_hash} not found: {e}") from e


def bind(
    abi_name: str,
    contract_address: str,
    web3: Any,
    wallet: Wallet | None,
    *,
    abi_path: str | Path | None = None,
    gas: int | None = None,
    gas_price_gwei: str | None = None,
    receipt_timeout: int | None = None,
    poll_latency: float | None = None,
    logger: logging.Logger | None = None,
) -> ContractBinding:
    """Load an ABI by name and bind it to ``contract_address``.

    ``wallet`` may be None for read-only use; sending then raises
    ``ConfigurationError``.
    """
    (logger or logging.getLogger(__name__)).info(f"Loading ABI: {abi_loader.resolve(abi_name, abi_path)}")
    abi = abi_loader.load(abi_name, abi_path)
    return ContractBinding(
        abi,
        contract_address,
        web3,
        wallet,
        gas=gas,
        gas_price_gwei=gas_price_gwei,
        receipt_timeout=receipt_timeout,
        poll_latency=poll_latency,
        logger=logger,
    )
