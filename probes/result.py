from pydantic import BaseModel, ConfigDict, Field


class ProbeResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    probe: str = Field(min_length=1)
    success: bool
    duration_seconds: float = Field(default=0.0, ge=0)
    error_kind: str | None = None
    error_message: str | None = None
