"""Shared fixtures: a wallet, ABI files on disk and an in-memory binding."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
from web3 import AsyncWeb3, AsyncHTTPProvider

from collective.chain.abi import abi_loader
from collective.chain.events import ContractEvent, TransactionOutcome
from collective.chain.wallet import Wallet

PRIVATE_KEY = "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
CREATED = "0x" + "ab" * 20
OTHER = "0x" + "cd" * 20


def function(name: str, inputs: list[str] | None = None, outputs: list[str] | None = None) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": f"arg{i}", "type": t} for i, t in enumerate(inputs or [])],
        "outputs": [{"name": "", "type": t} for t in (outputs or [])],
        "stateMutability": "view" if outputs else "nonpayable",
    }


def event(name: str, fields: list[tuple[str, str]], indexed: bool = False) -> dict[str, Any]:
    return {
        "type": "event",
        "name": name,
        "anonymous": False,
        "inputs": [{"name": n, "type": t, "indexed": indexed} for n, t in fields],
    }


BUILDER_ABI = [
    function("name", outputs=["string"]),
    function("version", outputs=["uint32"]),
    function("aCommunity"),
    function("withQuorum", ["uint256"]),
    function("build"),
    event("CommunityClassCreated", [("class", "address")]),
    event("Noise", [("value", "uint256")]),
]


def outcome(*events: ContractEvent, status: int = 1) -> TransactionOutcome:
    return TransactionOutcome(
        transaction_hash="0x" + "11" * 32,
        block_number=5,
        status=status,
        events=tuple(events),
    )


class FakeBinding:
    """Records calls and answers from canned values, standing in for a ContractBinding."""

    def __init__(
        self,
        calls: dict[str, Any] | None = None,
        outcomes: dict[str, TransactionOutcome] | None = None,
        past: list[ContractEvent] | None = None,
        transaction: dict[str, Any] | None = None,
    ):
        self.contract_address = CONTRACT
        self.logger = logging.getLogger("tests.fake_binding")
        self.call_results = dict(calls or {})
        self.outcomes = dict(outcomes or {})
        self.past = list(past or [])
        self.transaction = transaction or {"blockNumber": 5}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.transactions: list[tuple[str, tuple[Any, ...], int]] = []
        self.queries: list[tuple[str, Any, Any]] = []

    async def call(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        result = self.call_results[method]
        return result(*args) if callable(result) else result

    async def transact(self, method: str, *args: Any, value: int = 0) -> TransactionOutcome:
        self.transactions.append((method, args, value))
        return self.outcomes.get(method, outcome())

    async def past_events(self, event_name: str, from_block: Any = "earliest", to_block: Any = "latest"):
        self.queries.append((event_name, from_block, to_block))
        return [e for e in self.past if e.name == event_name]

    async def get_transaction(self, tx_hash: str) -> dict[str, Any]:
        return self.transaction

    @property
    def methods(self) -> list[str]:
        return [t[0] for t in self.transactions]


@pytest.fixture
def wallet() -> Wallet:
    return Wallet.from_private_key(PRIVATE_KEY)


@pytest.fixture
def abi_dir(tmp_path):
    """A directory holding CommunityBuilder.json as a compiler artifact."""
    (tmp_path / "CommunityBuilder.json").write_text(json.dumps({"abi": BUILDER_ABI}))
    yield tmp_path
    abi_loader.clear()


@pytest.fixture
def offline_web3() -> AsyncWeb3:
    """AsyncWeb3 that is never connected; enough to build contracts and decode logs."""
    return AsyncWeb3(AsyncHTTPProvider("http://127.0.0.1:8545"))
