"""Shared request and response models for API endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned by the exception handlers.

    Attributes:
        error: Short error title.
        detail: Human-readable description.
        type: Name of the exception class.
    """

    error: str
    detail: str
    type: str


class ServiceInfoResponse(BaseModel):
    """Body of the root endpoint.

    Attributes:
        message: Welcome message.
        version: Service version.
        teams: Number of configured teams.
        channel_groups: Number of configured channel groups.
    """

    message: str
    version: str
    teams: int = Field(ge=0)
    channel_groups: int = Field(ge=0)


class HealthResponse(BaseModel):
    """Body of the health check endpoint."""

    status: str
