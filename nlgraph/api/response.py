"""Standardized response builders for the GraphQL endpoint."""

from typing import Any

from fastapi.responses import JSONResponse

from nlgraph.api.models import ErrorResponse
from nlgraph.orchestrator.state import PipelineResult
from nlgraph.services.execution.models import ErrorItem


def build_error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    """Build ``{"errors": [{"message": ..., **extra}]}`` with the given status."""
    body = ErrorResponse(errors=[ErrorItem(message=message, **extra)])
    return JSONResponse(status_code=status_code, content=body.model_dump())


def build_nl_query_response(result: PipelineResult) -> JSONResponse:
    """Wrap a pipeline result as ``{"data": {"processNLQuery": ...}}`` (always 200)."""
    return JSONResponse(content={"data": {"processNLQuery": result.to_response()}})
