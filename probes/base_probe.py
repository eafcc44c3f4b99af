"""Abstract probe contract for scheduled health checks."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .context import CheckContext

ConfigBlob = str | bytes | Mapping[str, Any]


class BaseProbe(ABC):
    config_model: type[BaseModel]

    @abstractmethod
    def validate(self, config: ConfigBlob) -> None:
        """Check a configuration blob without touching the network."""
        pass

    @abstractmethod
    def run(self, ctx: CheckContext, config: ConfigBlob) -> None:
        """Execute the check once, raising a ProbeError on failure."""
        pass

    @classmethod
    def config_schema(cls) -> dict[str, Any]:
        """JSON schema of the configuration keys, defaults included."""
        return cls.config_model.model_json_schema(by_alias=True)
