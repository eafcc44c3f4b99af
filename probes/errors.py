"""Error kinds surfaced by probes to the calling framework."""

from typing import Any


class ProbeError(Exception):
    """Base class for every probe failure."""


class DecodeError(ProbeError):
    """Configuration blob is malformed or violates the schema types."""


class ConfigError(ProbeError):
    """A configuration field is missing or invalid, or the deadline is unset."""

    def __init__(self, field: str, value: Any, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"{field} is invalid; got {value!r}")


class ConnectionError(ProbeError):
    """Connecting to or pinging the target server failed."""


class QueryError(ProbeError):
    """The filter could not be parsed or executed, or matched nothing."""

    def __init__(self, message: str, *, query: str | None = None, no_documents: bool = False):
        self.query = query
        self.no_documents = no_documents
        super().__init__(message)


__all__ = ["ProbeError", "DecodeError", "ConfigError", "ConnectionError", "QueryError"]
