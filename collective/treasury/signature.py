"""Approver signatures for treasury withdrawals."""

from dataclasses import dataclass

from eth_abi import encode
from web3 import Web3

from collective.chain.wallet import Wallet

TRANSACTION_TYPES = ["address", "uint256", "string", "bytes", "uint256"]


@dataclass(frozen=True)
class Transaction:
    """A scheduled call, as attached to a proposal or approved by a treasury."""

    target: str
    value: int
    signature: str
    calldata: bytes
    schedule_time: int


def get_transaction_hash(transaction: Transaction) -> str:
    """Keccak-256 of the ABI encoded transaction, 0x-prefixed."""
    message = encode(
        TRANSACTION_TYPES,
        [
            Web3.to_checksum_address(transaction.target),
            transaction.value,
            transaction.signature,
            transaction.calldata,
            transaction.schedule_time,
        ],
    )
    return Web3.to_hex(Web3.keccak(message))


def get_eth_signature(wallet: Wallet, transaction_hash: str) -> str:
    """Sign a transaction hash with the wallet key."""
    return wallet.sign_hash(transaction_hash)
