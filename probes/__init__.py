"""Public entrypoints for probe validation, execution, and pass/fail checks."""

import time
from typing import Any

from ._logging import get_logger
from .base_probe import BaseProbe, ConfigBlob
from .context import CheckContext, timeout_from_deadline
from .errors import ConfigError, ConnectionError, DecodeError, ProbeError, QueryError
from .factory import get_probe, get_probe_class
from .result import ProbeResult

LOGGER = get_logger("checks")


def validate(name: str, config: ConfigBlob) -> None:
    """Validate a configuration blob for the named probe."""
    get_probe(name).validate(config)


def run(name: str, ctx: CheckContext, config: ConfigBlob) -> None:
    """Run the named probe once, raising a ProbeError on failure."""
    get_probe(name).run(ctx, config)


def check(
    name: str,
    ctx: CheckContext,
    config: ConfigBlob,
    probe: BaseProbe | None = None,
    raise_on_error: bool = False,
) -> ProbeResult:
    """Run the named probe and record the outcome as pass/fail."""
    started = time.monotonic()
    try:
        (probe or get_probe(name)).run(ctx, config)
    except ProbeError as exc:
        LOGGER.exception("Probe %s failed", name)
        if raise_on_error:
            raise
        return ProbeResult(
            probe=name,
            success=False,
            duration_seconds=time.monotonic() - started,
            error_kind=type(exc).__name__,
            error_message=str(exc),
        )

    return ProbeResult(probe=name, success=True, duration_seconds=time.monotonic() - started)


def config_schema(name: str) -> dict[str, Any]:
    """Describe the configuration keys accepted by the named probe."""
    return get_probe_class(name).config_schema()


__all__ = [
    "BaseProbe",
    "CheckContext",
    "ConfigError",
    "ConnectionError",
    "DecodeError",
    "ProbeError",
    "ProbeResult",
    "QueryError",
    "check",
    "config_schema",
    "get_probe",
    "get_probe_class",
    "run",
    "timeout_from_deadline",
    "validate",
]
