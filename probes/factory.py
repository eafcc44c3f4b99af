"""Probe discovery by name, based on module scanning of the probes package."""

import importlib
import inspect
from pkgutil import walk_packages

from ._logging import get_logger
from .base_probe import BaseProbe

logger = get_logger("factory")
_PROBES_PACKAGE = "probes"


def get_probe(name: str, **kwargs) -> BaseProbe:
    """Instantiate the probe registered under ``name``."""
    probe_name = _normalize_name(name)
    probe_class = _resolve_probe_class(probe_name)

    logger.info("Creating probe name=%s class=%s", probe_name, probe_class.__name__)

    try:
        return probe_class(**kwargs)
    except TypeError as exc:
        raise TypeError(f"Invalid parameters for probe '{probe_name}' using '{probe_class.__name__}': {exc}") from exc


def get_probe_class(name: str) -> type[BaseProbe]:
    return _resolve_probe_class(_normalize_name(name))


def _normalize_name(value: object) -> str:
    """Validate and normalize probe name to lowercase string."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Probe name must be a non-empty string.")
    return value.strip().lower()


def _resolve_probe_class(name: str) -> type[BaseProbe]:
    """Resolve probe class by scanning candidate modules."""
    for module_name in _iter_candidate_modules(name):
        probe_class = _find_probe_class(module_name, name)
        if probe_class is not None:
            return probe_class

    raise ValueError(f"Unsupported probe '{name}'. Add a probe module under '{_PROBES_PACKAGE}.{name}'.")


def _iter_candidate_modules(name: str) -> list[str]:
    """Build candidate module names for the probe and its nested probe modules."""
    candidates: set[str] = {
        f"{_PROBES_PACKAGE}.{name}",
        f"{_PROBES_PACKAGE}.{name}.probe",
    }

    base_package = importlib.import_module(_PROBES_PACKAGE)

    for module_info in walk_packages(base_package.__path__, prefix=f"{_PROBES_PACKAGE}."):
        module_name = module_info.name
        if module_name.endswith(f".{name}") or module_name.endswith(f".{name}.probe"):
            candidates.add(module_name)

    return sorted(candidates)


def _find_probe_class(module_name: str, name: str) -> type[BaseProbe] | None:
    """Return preferred or first concrete probe class defined in the module."""
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        # only a missing candidate module means "no such probe"
        if exc.name is None or not module_name.startswith(exc.name):
            raise
        return None

    preferred_class_name = f"{name}Probe"
    fallback: type[BaseProbe] | None = None

    for _, member in inspect.getmembers(module, inspect.isclass):
        if not issubclass(member, BaseProbe) or inspect.isabstract(member):
            continue
        if member.__module__ != module.__name__:
            continue

        if member.__name__.lower() == preferred_class_name.lower():
            return member

        if fallback is None:
            fallback = member

    return fallback


__all__ = ["get_probe", "get_probe_class"]
