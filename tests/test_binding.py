"""Tests for ContractBinding against a stubbed transport."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_abi import encode
from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import ContractLogicError, TimeExhausted

from collective.chain.binding import ContractBinding, bind
from collective.chain.events import extract_field
from collective.community import CommunityBuilder
from collective.errors import ConfigurationError, MissingEventError, RemoteError

from conftest import BUILDER_ABI, CONTRACT, CREATED

TX_HASH = HexBytes(b"\x11" * 32)


@pytest.fixture
def web3(offline_web3):
    """Mocked transport that still builds real contract objects."""
    w3 = MagicMock()
    w3.eth.contract.side_effect = offline_web3.eth.contract
    w3.eth.get_transaction_count = AsyncMock(return_value=3)
    w3.eth.send_raw_transaction = AsyncMock(return_value=TX_HASH)
    return w3


@pytest.fixture
def binding(abi_dir, web3, wallet):
    return bind("CommunityBuilder", CONTRACT, web3, wallet, abi_path=abi_dir, gas_price_gwei="1")


def _stub_function(binding, name, **attrs):
    fn = SimpleNamespace(**attrs)
    binding.contract.functions = SimpleNamespace(**{name: lambda *args: fn})
    return fn


def _receipt(status: int = 1, logs: list | None = None) -> dict:
    return {"transactionHash": TX_HASH, "blockNumber": 5, "status": status, "logs": logs or []}


def _created_log() -> dict:
    return {
        "address": CONTRACT,
        "topics": [Web3.keccak(text="CommunityClassCreated(address)")],
        "data": encode(["address"], [CREATED]),
        "logIndex": 0,
        "transactionIndex": 0,
        "transactionHash": TX_HASH,
        "blockHash": HexBytes(b"\x22" * 32),
        "blockNumber": 5,
    }


def _unsigned_tx() -> dict:
    return {
        "to": CONTRACT,
        "data": "0x",
        "gas": 570_000,
        "gasPrice": 10**9,
        "nonce": 3,
        "value": 0,
        "chainId": 1337,
    }


class TestBind:
    def test_binds_descriptor_to_address(self, binding, wallet):
        assert binding.contract_address == CONTRACT
        assert binding.wallet is wallet
        assert binding.event_names == ["CommunityClassCreated", "Noise"]
        assert binding.gas_price == 10**9

    def test_missing_descriptor(self, tmp_path, web3, wallet):
        with pytest.raises(ConfigurationError):
            bind("Governance", CONTRACT, web3, wallet, abi_path=tmp_path)

    def test_invalid_address(self, abi_dir, web3, wallet):
        with pytest.raises(ConfigurationError):
            bind("CommunityBuilder", "0x1234", web3, wallet, abi_path=abi_dir)

    def test_lowercase_address_is_checksummed(self, web3, wallet):
        binding = ContractBinding(BUILDER_ABI, CONTRACT.lower(), web3, wallet)
        assert binding.contract_address == CONTRACT

    def test_uses_injected_logger(self, abi_dir, web3, wallet):
        logger = MagicMock()
        binding = bind("CommunityBuilder", CONTRACT, web3, wallet, abi_path=abi_dir, logger=logger)
        assert binding.logger is logger
        logger.info.assert_called()


class TestCall:
    @pytest.mark.asyncio
    async def test_returns_decoded_value(self, binding, wallet):
        fn = _stub_function(binding, "name", call=AsyncMock(return_value="CommunityBuilder"))

        assert await binding.call("name") == "CommunityBuilder"
        fn.call.assert_awaited_once_with({"from": wallet.address})

    @pytest.mark.asyncio
    async def test_unknown_method(self, binding):
        with pytest.raises(ConfigurationError):
            await binding.call("owner")

    @pytest.mark.asyncio
    async def test_revert_is_remote_error(self, binding):
        _stub_function(binding, "name", call=AsyncMock(side_effect=ContractLogicError("execution reverted")))

        with pytest.raises(RemoteError) as excinfo:
            await binding.call("name")
        assert isinstance(excinfo.value.__cause__, ContractLogicError)

    @pytest.mark.asyncio
    async def test_connection_failure_is_remote_error(self, binding):
        _stub_function(binding, "name", call=AsyncMock(side_effect=ConnectionRefusedError()))

        with pytest.raises(RemoteError):
            await binding.call("name")


class TestTransact:
    @pytest.mark.asyncio
    async def test_signs_sends_and_decodes_events(self, binding, web3, wallet):
        fn = _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.wait_for_transaction_receipt = AsyncMock(return_value=_receipt(logs=[_created_log()]))

        outcome = await binding.transact("build")

        params = fn.build_transaction.await_args.args[0]
        assert params["from"] == wallet.address
        assert params["nonce"] == 3
        assert params["gas"] == binding.gas
        web3.eth.send_raw_transaction.assert_awaited_once()
        assert outcome.success
        assert outcome.transaction_hash == "0x" + "11" * 32
        assert extract_field(outcome, "CommunityClassCreated", "class") == Web3.to_checksum_address(CREATED)

    @pytest.mark.asyncio
    async def test_passes_value(self, binding, web3):
        fn = _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.wait_for_transaction_receipt = AsyncMock(return_value=_receipt())

        await binding.transact("build", value=500)

        assert fn.build_transaction.await_args.args[0]["value"] == 500

    @pytest.mark.asyncio
    async def test_success_without_event(self, binding, web3):
        _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.wait_for_transaction_receipt = AsyncMock(return_value=_receipt())

        outcome = await binding.transact("build")

        with pytest.raises(MissingEventError):
            extract_field(outcome, "CommunityClassCreated", "class")

    @pytest.mark.asyncio
    async def test_reverted_receipt(self, binding, web3):
        _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.wait_for_transaction_receipt = AsyncMock(return_value=_receipt(status=0))

        with pytest.raises(RemoteError, match="reverted"):
            await binding.transact("build")

    @pytest.mark.asyncio
    async def test_receipt_timeout(self, binding, web3):
        _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.wait_for_transaction_receipt = AsyncMock(side_effect=TimeExhausted("not mined"))

        with pytest.raises(RemoteError):
            await binding.transact("build")

    @pytest.mark.asyncio
    async def test_no_retry(self, binding, web3):
        _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.send_raw_transaction = AsyncMock(side_effect=ValueError("insufficient funds"))

        with pytest.raises(RemoteError):
            await binding.transact("build")
        web3.eth.send_raw_transaction.assert_awaited_once()


class TestPastEvents:
    @pytest.mark.asyncio
    async def test_queries_block_range(self, binding):
        log = {
            "event": "CommunityClassCreated",
            "args": {"class": CREATED},
            "logIndex": 2,
            "transactionHash": TX_HASH,
            "blockNumber": 9,
        }
        get_logs = AsyncMock(return_value=[log])
        binding.contract.events = SimpleNamespace(CommunityClassCreated=SimpleNamespace(get_logs=get_logs))

        events = await binding.past_events("CommunityClassCreated", 9, 9)

        get_logs.assert_awaited_once_with(from_block=9, to_block=9)
        assert events[0].args == {"class": CREATED}
        assert events[0].transaction_hash == "0x" + "11" * 32

    @pytest.mark.asyncio
    async def test_unknown_event(self, binding):
        with pytest.raises(ConfigurationError):
            await binding.past_events("Transfer")


class TestReadOnly:
    @pytest.fixture
    def read_only(self, abi_dir, web3):
        return bind("CommunityBuilder", CONTRACT, web3, None, abi_path=abi_dir)

    @pytest.mark.asyncio
    async def test_call_without_wallet(self, read_only):
        fn = _stub_function(read_only, "name", call=AsyncMock(return_value="CommunityBuilder"))

        assert await read_only.call("name") == "CommunityBuilder"
        fn.call.assert_awaited_once_with({})

    @pytest.mark.asyncio
    async def test_transact_requires_wallet(self, read_only, web3):
        with pytest.raises(ConfigurationError):
            await read_only.transact("build")
        web3.eth.send_raw_transaction.assert_not_awaited()


class TestReceiptWait:
    def test_bind_forwards_receipt_settings(self, abi_dir, web3, wallet):
        binding = bind(
            "CommunityBuilder", CONTRACT, web3, wallet, abi_path=abi_dir, receipt_timeout=12, poll_latency=0.1
        )
        assert binding.receipt_timeout == 12
        assert binding.poll_latency == 0.1

    def test_connect_forwards_receipt_settings(self, abi_dir, web3, wallet):
        builder = CommunityBuilder.connect(CONTRACT, web3, wallet, abi_path=abi_dir, receipt_timeout=12)
        assert builder.binding.receipt_timeout == 12

    @pytest.mark.asyncio
    async def test_transact_waits_with_configured_timeout(self, abi_dir, web3, wallet):
        binding = bind(
            "CommunityBuilder", CONTRACT, web3, wallet, abi_path=abi_dir, receipt_timeout=12, poll_latency=0.1
        )
        _stub_function(binding, "build", build_transaction=AsyncMock(return_value=_unsigned_tx()))
        web3.eth.wait_for_transaction_receipt = AsyncMock(return_value=_receipt())

        await binding.transact("build")

        web3.eth.wait_for_transaction_receipt.assert_awaited_once_with(TX_HASH, timeout=12, poll_latency=0.1)
