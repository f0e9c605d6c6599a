"""Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field


class MaintenanceStatusResponse(BaseModel):
    """Response schema for ``/__maintenance-status``."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool
    source_var: str | None = Field(default=None, alias="sourceVar")
    pid: int
    uptime_seconds: float = Field(alias="uptimeSeconds", ge=0)
    timestamp: str = Field(description="ISO-8601 UTC time of the response")
