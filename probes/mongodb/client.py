"""Narrow document-database client interface and its pymongo implementation."""

from typing import Any, Protocol

from pymongo import MongoClient
from pymongo.errors import NetworkTimeout

from .._logging import get_logger, redact_uri

LOGGER = get_logger("mongodb.client")


class DocumentConnection(Protocol):
    def ping(self) -> None: ...

    def find_one(self, database: str, collection: str, filter: dict[str, Any]) -> bool: ...

    def close(self) -> None: ...

    def __enter__(self) -> "DocumentConnection": ...

    def __exit__(self, *exc_info: object) -> None: ...


class ConnectFunc(Protocol):
    def __call__(self, uri: str, timeout: int) -> DocumentConnection: ...


class PyMongoConnection:
    def __init__(self, client: MongoClient):
        self._client = client

    def ping(self) -> None:
        self._client.admin.command("ping")

    def find_one(self, database: str, collection: str, filter: dict[str, Any]) -> bool:
        document = self._client[database][collection].find_one(filter)
        return document is not None

    def close(self) -> None:
        LOGGER.debug("Closing MongoDB client")
        self._client.close()

    def __enter__(self) -> "PyMongoConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def connect(uri: str, timeout: int) -> PyMongoConnection:
    """Open a client whose connect, selection, and operation timeouts all equal ``timeout`` seconds."""
    # pymongo reads a zero timeout as "wait forever"
    if timeout <= 0:
        raise NetworkTimeout(f"deadline exceeded before connecting (timeout={timeout}s)")

    timeout_ms = timeout * 1000
    LOGGER.info("Connecting to %s with timeout=%ss", redact_uri(uri), timeout)
    client: MongoClient = MongoClient(
        uri,
        connectTimeoutMS=timeout_ms,
        serverSelectionTimeoutMS=timeout_ms,
        timeoutMS=timeout_ms,
    )
    return PyMongoConnection(client)


__all__ = ["ConnectFunc", "DocumentConnection", "PyMongoConnection", "connect"]
