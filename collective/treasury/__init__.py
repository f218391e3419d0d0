"""Treasury contract wrappers."""

from collective.treasury.builder import TreasuryBuilder
from collective.treasury.signature import Transaction, get_eth_signature, get_transaction_hash
from collective.treasury.vault import Treasury

__all__ = [
    "TreasuryBuilder",
    "Transaction",
    "get_eth_signature",
    "get_transaction_hash",
    "Treasury",
]
