"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from nlgraph.services.execution.models import ErrorItem


class GraphQLRequest(BaseModel):
    """GraphQL-over-HTTP request body."""

    query: str | None = Field(None, description="GraphQL document")
    operation_name: str | None = Field(None, alias="operationName", description="Operation to run")
    variables: dict[str, Any] | None = Field(None, description="Operation variables")


class ErrorResponse(BaseModel):
    """Top-level error list returned with 4xx/5xx statuses."""

    errors: list[ErrorItem]


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
