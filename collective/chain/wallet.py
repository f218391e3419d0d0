"""Signing credentials."""

from dataclasses import dataclass
from typing import Any

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from collective.config import settings
from collective.errors import ConfigurationError


def get_key_as_ethereum_key(key: str) -> str:
    """Prefix a hex private key with ``0x`` if it lacks one."""
    key = key.strip()
    if key.startswith("0x"):
        return key
    return f"0x{key}"


@dataclass(frozen=True)
class Wallet:
    """A local account used to sign transactions and hashes."""

    account: LocalAccount

    @classmethod
    def from_private_key(cls, private_key: str | None = None) -> "Wallet":
        key = private_key or settings.private_key
        if not key:
            raise ConfigurationError("No private key configured (COLLECTIVE_PRIVATE_KEY)")
        try:
            account = Account.from_key(get_key_as_ethereum_key(key))
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid private key: {e}") from e
        return cls(account)

    @property
    def address(self) -> str:
        return self.account.address

    def sign_transaction(self, tx: dict[str, Any]) -> bytes:
        """Sign a transaction and return the raw encoded bytes."""
        signed = self.account.sign_transaction(tx)
        return signed.raw_transaction

    def sign_hash(self, message_hash: bytes | str) -> str:
        """EIP-191 sign a 32 byte hash, returning the 0x-prefixed signature."""
        if isinstance(message_hash, str):
            message = encode_defunct(hexstr=message_hash)
        else:
            message = encode_defunct(primitive=message_hash)
        signed = self.account.sign_message(message)
        return "0x" + bytes(signed.signature).hex()
