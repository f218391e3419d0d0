"""Decoded contract events and field extraction."""

from dataclasses import dataclass, field
from typing import Any, Iterable

from web3 import Web3
from web3.logs import DISCARD

from collective.errors import AmbiguousEventError, MissingEventError, MissingFieldError


@dataclass(frozen=True)
class ContractEvent:
    """A decoded event log."""

    name: str
    args: dict[str, Any] = field(default_factory=dict)
    log_index: int | None = None
    transaction_hash: str | None = None
    block_number: int | None = None
    address: str | None = None

    @classmethod
    def from_log(cls, log: Any) -> "ContractEvent":
        """Build from a web3 event data mapping."""
        tx_hash = log.get("transactionHash")
        return cls(
            name=log["event"],
            args=dict(log["args"]),
            log_index=log.get("logIndex"),
            transaction_hash=_to_hex(tx_hash) if tx_hash is not None else None,
            block_number=log.get("blockNumber"),
            address=log.get("address"),
        )


@dataclass(frozen=True)
class TransactionOutcome:
    """Result of a mined transaction."""

    transaction_hash: str
    block_number: int | None
    status: int
    events: tuple[ContractEvent, ...] = ()

    @property
    def success(self) -> bool:
        return self.status == 1


def decode_receipt_events(contract: Any, event_names: Iterable[str], receipt: Any) -> tuple[ContractEvent, ...]:
    """Decode every log in a receipt that matches one of the contract's events.

    Logs emitted by other contracts are skipped even when their signature
    matches, as are logs of unknown events. Events are returned in log order.
    """
    decoded: list[ContractEvent] = []
    for name in event_names:
        event = getattr(contract.events, name)
        for log in event().process_receipt(receipt, errors=DISCARD):
            if Web3.to_checksum_address(log["address"]) != contract.address:
                continue
            decoded.append(ContractEvent.from_log(log))

    decoded.sort(key=lambda e: -1 if e.log_index is None else e.log_index)
    return tuple(decoded)


def _events_of(source: TransactionOutcome | Iterable[ContractEvent]) -> Iterable[ContractEvent]:
    if isinstance(source, TransactionOutcome):
        return source.events
    return source


def find_event(source: TransactionOutcome | Iterable[ContractEvent], event_name: str) -> ContractEvent:
    """Get the single event named ``event_name``."""
    matches = [e for e in _events_of(source) if e.name == event_name]
    if not matches:
        raise MissingEventError(f"Event {event_name} not emitted")
    if len(matches) > 1:
        raise AmbiguousEventError(f"Event {event_name} emitted {len(matches)} times")
    return matches[0]


def extract_field(
    source: TransactionOutcome | Iterable[ContractEvent],
    event_name: str,
    field_name: str,
) -> Any:
    """Get a field of the single event named ``event_name``."""
    return event_field(find_event(source, event_name), field_name)


def event_field(event: ContractEvent, field_name: str) -> Any:
    value = event.args.get(field_name)
    if value is None:
        raise MissingFieldError(f"Event {event.name} has no field {field_name}")
    return value


def _to_hex(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return str(value)
