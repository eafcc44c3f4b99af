"""Decoding of probe configuration blobs into typed records."""

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ._logging import get_logger, redact_config
from .errors import DecodeError

LOGGER = get_logger("config")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_json_root(data: Any) -> dict[str, Any]:
    """Ensure configuration blobs deserialize to a dictionary root."""
    if isinstance(data, dict):
        return data
    raise DecodeError("Probe configuration must contain a JSON object at the root")


def _read_config_blob(config: str | bytes | Mapping[str, Any]) -> dict[str, Any]:
    """Turn JSON text, bytes, or an already decoded mapping into a dict."""
    if isinstance(config, Mapping):
        return dict(config)

    if isinstance(config, (bytes, bytearray)):
        try:
            config = config.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Probe configuration is not valid UTF-8: {exc}") from exc

    if not isinstance(config, str):
        raise DecodeError(f"Unsupported probe configuration type: {type(config).__name__}")

    try:
        raw_data = json.loads(config)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise DecodeError(f"Probe configuration is not valid JSON: {exc}") from exc

    return _validate_json_root(raw_data)


def decode_config(config: str | bytes | Mapping[str, Any], model: type[ModelT]) -> ModelT:
    """Decode a configuration blob into ``model``, applying its defaults."""
    values = _read_config_blob(config)

    try:
        decoded = model.model_validate(values)
    except ValidationError as exc:
        LOGGER.error("Probe configuration rejected by %s schema", model.__name__)
        raise DecodeError(f"Invalid probe configuration: {exc}") from exc

    LOGGER.debug("Probe configuration decoded: %s", redact_config(decoded.model_dump()))
    return decoded
