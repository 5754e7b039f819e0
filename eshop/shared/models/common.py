# eshop/shared/models/common.py
"""
Models shared by every service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DocumentModel(BaseModel):
    """
    Base for records exposed over the API.
    Fields are named after table columns and serialised under their
    camelCase aliases, so a row dict validates directly.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class RequestModel(BaseModel):
    """Base for request bodies; accepts both camelCase and snake_case keys."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class ImageDTO(BaseModel):
    """Hosted image reference, stored as given."""
    model_config = ConfigDict(extra="allow")

    public_id: str | None = None
    url: str | None = None


class ErrorResponse(BaseModel):
    """Failure envelope."""

    success: bool = False
    error: str


class HealthStatus(BaseModel):
    """Service health."""

    service: str
    status: str = "healthy"  # healthy, degraded, unhealthy
    version: str | None = None
    uptime_seconds: float | None = None
    dependencies: dict[str, str] = Field(default_factory=dict)
    details: dict[str, Any] = Field(default_factory=dict)
