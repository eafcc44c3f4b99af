"""MongoDB liveness probe: connect, ping, and optionally look up one document."""

from typing import Any
from urllib.parse import quote_plus

from bson import json_util
from bson.errors import BSONError

from .._config import decode_config
from .._logging import get_logger, redact_uri
from ..base_probe import BaseProbe, ConfigBlob
from ..context import CheckContext, timeout_from_deadline
from ..errors import ConfigError, ConnectionError, QueryError
from .client import ConnectFunc, connect
from .config import MongoDBProbeConfig

LOGGER = get_logger("mongodb.probe")
_REQUIRED_TEXT_FIELDS = ("username", "password", "database")


def _format_host(server: str) -> str:
    # IPv6 literals need brackets so the port separator stays unambiguous
    if ":" in server and not server.startswith("["):
        return f"[{server}]"
    return server


def build_uri(config: MongoDBProbeConfig) -> str:
    return "mongodb://{}:{}@{}:{}/{}?authSource={}".format(
        quote_plus(config.username),
        quote_plus(config.password),
        _format_host(config.server),
        config.port,
        quote_plus(config.database),
        quote_plus(config.auth_source),
    )


def parse_query(query: str) -> dict[str, Any]:
    """Parse an Extended JSON filter document."""
    try:
        parsed = json_util.loads(query)
    except (ValueError, TypeError, RecursionError, BSONError) as exc:
        raise QueryError(f"failed to parse query: {exc}", query=query) from exc

    if not isinstance(parsed, dict):
        raise QueryError(
            f"failed to parse query: expected a document, got {type(parsed).__name__}",
            query=query,
        )
    return parsed


class MongoDBProbe(BaseProbe):
    config_model = MongoDBProbeConfig

    def __init__(self, connect_func: ConnectFunc = connect):
        self._connect = connect_func

    def validate(self, config: ConfigBlob) -> None:
        conf = decode_config(config, MongoDBProbeConfig)

        if not conf.server:
            raise ConfigError("server", conf.server, f"server is required; got {conf.server!r}")

        if conf.port <= 0 or conf.port > 65535:
            raise ConfigError("port", conf.port, f"port is invalid; got {conf.port}")

        for field in _REQUIRED_TEXT_FIELDS:
            value = getattr(conf, field)
            if not value:
                raise ConfigError(field, value, f"{field} is required; got {value!r}")

    def run(self, ctx: CheckContext, config: ConfigBlob) -> None:
        conf = decode_config(config, MongoDBProbeConfig)

        if ctx.deadline is None:
            raise ConfigError("deadline", None, "context deadline is not set")

        timeout = timeout_from_deadline(ctx)
        uri = build_uri(conf)
        LOGGER.info("Running MongoDB probe against %s", redact_uri(uri))

        try:
            connection = self._connect(uri, timeout)
        except Exception as exc:
            raise ConnectionError(f"failed to connect to mongodb server: {exc}") from exc

        with connection:
            try:
                connection.ping()
            except Exception as exc:
                raise ConnectionError(f"failed to ping mongodb server: {exc}") from exc

            if not conf.has_query:
                LOGGER.info("MongoDB probe passed (ping only)")
                return

            self._run_query(connection, conf)

        LOGGER.info("MongoDB probe passed for %s.%s", conf.database, conf.collection)

    def _run_query(self, connection, conf: MongoDBProbeConfig) -> None:
        filter = parse_query(conf.query)

        try:
            found = connection.find_one(conf.database, conf.collection, filter)
        except Exception as exc:
            raise QueryError(f"failed to execute query: {exc}", query=conf.query) from exc

        if not found:
            raise QueryError(
                f"no documents returned from query: {conf.query!r}",
                query=conf.query,
                no_documents=True,
            )
