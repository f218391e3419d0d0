"""Blockchain interaction modules."""

from collective.chain.abi import ABILoader, abi_loader, load_abi
from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import decode_short_name, encode_short_name, parse_int_or_throw
from collective.chain.events import (
    ContractEvent,
    TransactionOutcome,
    event_field,
    extract_field,
    find_event,
)
from collective.chain.rpc import RPCClient
from collective.chain.wallet import Wallet, get_key_as_ethereum_key

__all__ = [
    "ABILoader",
    "abi_loader",
    "load_abi",
    "ContractBinding",
    "bind",
    "decode_short_name",
    "encode_short_name",
    "parse_int_or_throw",
    "ContractEvent",
    "TransactionOutcome",
    "extract_field",
    "event_field",
    "find_event",
    "RPCClient",
    "Wallet",
    "get_key_as_ethereum_key",
]
