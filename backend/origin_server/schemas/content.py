"""Response models for the origin content endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field


class InfoResponse(BaseModel):
    """Payload returned by ``GET /api/info``."""

    message: str = Field(..., description="Fixed greeting from the origin.")
    timestamp: str = Field(
        ...,
        description="Request instant in ISO-8601 UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z.",
    )
    server: str = Field(..., description="Identifier of the server that produced the payload.")


class SampleResponse(BaseModel):
    """Freshly generated payload returned by ``GET /sample.json``."""

    message: str
    timestamp: str = Field(
        ...,
        description="Request instant in the display time zone, 24-hour clock, e.g. 5/3/2024, 14:05:09.",
    )
    cached: bool = Field(
        default=False,
        description="Always false at the origin; caching tiers in front of it may rewrite this.",
    )
    request_id: str = Field(
        ...,
        serialization_alias="requestId",
        description="Illustrative base-36 token. Not guaranteed to be unique.",
    )
    server: str

