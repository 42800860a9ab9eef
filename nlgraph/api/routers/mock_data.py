"""Mock GraphQL data service endpoint."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from nlgraph.api.models import GraphQLRequest
from nlgraph.api.response import build_error_response
from nlgraph.services.mock_data.service import execute_mock_query

logger = logging.getLogger(__name__)

router = APIRouter()

_QUERY_REQUIRED_MESSAGE = "Must provide query string."


@router.post("/mcp-graphql")
async def mock_graphql_post(request: GraphQLRequest) -> JSONResponse:
    """Execute a GraphQL request (JSON body) against the sample data."""
    if not request.query:
        return build_error_response(400, _QUERY_REQUIRED_MESSAGE)
    result = await execute_mock_query(request.query, request.variables, request.operation_name)
    return JSONResponse(content=result)


@router.get("/mcp-graphql")
async def mock_graphql_get(
    query: str | None = None,
    variables: str | None = None,
    operation_name: str | None = Query(None, alias="operationName"),
) -> JSONResponse:
    """Execute a GraphQL request passed as query parameters."""
    if not query:
        return build_error_response(400, _QUERY_REQUIRED_MESSAGE)

    parsed_variables: dict[str, Any] | None = None
    if variables:
        try:
            parsed_variables = json.loads(variables)
        except json.JSONDecodeError:
            return build_error_response(400, "Variables are invalid JSON.")
        if not isinstance(parsed_variables, dict):
            return build_error_response(400, "Variables must be a JSON object.")

    result = await execute_mock_query(query, parsed_variables, operation_name)
    return JSONResponse(content=result)
