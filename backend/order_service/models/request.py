"""API response models shared across routes."""

from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str
    message: Optional[str] = None
    field: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    services: dict[str, str]
