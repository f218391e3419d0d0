"""Field encodings used at the contract boundary."""

import re
from typing import Any

from eth_utils import is_hexstr
from web3 import Web3

from collective.errors import DecodingError, EncodingError

SHORT_NAME_SIZE = 32

_WHOLE_NUMBER = re.compile(r"[+-]?\d+")


def encode_short_name(name: str) -> str:
    """Encode text as a right padded ``bytes32`` hex string.

    A value that is already a 0x-prefixed 32 byte hex string is returned as is.
    """
    if is_hexstr(name) and name.startswith("0x") and len(name) == 2 + SHORT_NAME_SIZE * 2:
        return name.lower()

    raw = name.encode("utf-8")
    if len(raw) > SHORT_NAME_SIZE:
        raise EncodingError(f"Short name exceeds {SHORT_NAME_SIZE} bytes: {name!r}")
    return Web3.to_hex(raw.ljust(SHORT_NAME_SIZE, b"\x00"))


def decode_short_name(value: bytes | str) -> str:
    """Decode a ``bytes32`` value, dropping the zero padding."""
    if isinstance(value, str):
        if not is_hexstr(value):
            raise DecodingError(f"Not a hex encoded name: {value!r}")
        value = Web3.to_bytes(hexstr=value)

    try:
        return bytes(value).rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError(f"Name is not valid UTF-8: {value!r}") from e


def parse_int_or_throw(value: Any) -> int:
    """Convert a returned numeric field to ``int``.

    Accepts ints and decimal strings; anything else raises ``DecodingError``.
    """
    if isinstance(value, bool):
        raise DecodingError(f"Not a whole number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _WHOLE_NUMBER.fullmatch(value.strip()):
        return int(value.strip())
    raise DecodingError(f"Not a whole number: {value!r}")
