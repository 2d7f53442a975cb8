"""Schema for the health probe."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default="OK")
    timestamp: str
    livekit_configured: bool = Field(alias="livekitConfigured")
