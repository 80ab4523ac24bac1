"""Request and response models of the HTTP layer."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field


class GraphRequest(BaseModel):
    """Request model for graph building."""

    folder: str = Field(..., description="Dataset folder name under the data directory")


class RecordResponse(BaseModel):
    """A single dataset row keyed by its header names."""

    folder: str
    file_name: str
    key: str
    data: dict[str, str]


class HealthResponse(BaseModel):
    """Health check response model."""

    status: Literal["healthy"]
    version: str
    gateway_status: Literal["initialized", "idle"]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
