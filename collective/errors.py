"""Error hierarchy for collective contract wrappers."""


class CollectiveError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(CollectiveError):
    """ABI descriptor, address or settings are missing or invalid."""


class RemoteError(CollectiveError):
    """The RPC transport or the contract rejected a call."""


class DecodingError(CollectiveError):
    """A returned field could not be converted to the expected type."""


class EncodingError(CollectiveError):
    """A value could not be encoded for transmission."""


class EventError(CollectiveError):
    """An expected event could not be recovered from a transaction."""


class MissingEventError(EventError):
    """No event with the expected name was emitted."""


class AmbiguousEventError(EventError):
    """More than one event with the expected name was emitted."""


class MissingFieldError(EventError):
    """The event was emitted but does not carry the expected field."""
