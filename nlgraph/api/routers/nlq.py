"""Natural language query and health endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from nlgraph.api.dependencies import get_orchestrator
from nlgraph.api.models import HealthResponse
from nlgraph.api.response import build_error_response, build_nl_query_response
from nlgraph.config.constants import (
    DIRECT_QUERY_REMOVED_MESSAGE,
    NL_QUERY_REQUIRED_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    Operation,
    unknown_operation_message,
)
from nlgraph.config.settings import Settings, get_settings
from nlgraph.orchestrator.pipeline import PipelineOrchestrator
from nlgraph.services.errors import InputError

logger = logging.getLogger(__name__)

router = APIRouter()


def extract_nl_query(body: dict[str, Any]) -> str:
    """
    Validate the operation and pull ``variables.nlQuery`` out of the body.

    Raises:
        InputError: Unsupported operation or missing/blank nlQuery
    """
    operation_name = body.get("operationName")

    if operation_name == Operation.PROCESS_DIRECT_QUERY.value:
        logger.info("Received request for removed operation: %s", operation_name)
        raise InputError(DIRECT_QUERY_REMOVED_MESSAGE)
    if operation_name != Operation.PROCESS_NL_QUERY.value:
        logger.info("Unknown operation name: %s", operation_name)
        raise InputError(unknown_operation_message(operation_name))

    variables = body.get("variables")
    nl_query = variables.get("nlQuery") if isinstance(variables, dict) else None
    if not isinstance(nl_query, str) or not nl_query.strip():
        raise InputError(NL_QUERY_REQUIRED_MESSAGE)
    return nl_query.strip()


@router.post("/graphql")
async def process_graphql_request(
    request: Request,
    orchestrator: PipelineOrchestrator = Depends(get_orchestrator),  # noqa: B008
) -> JSONResponse:
    """
    Single GraphQL-style endpoint.

    Only ``ProcessNaturalLanguageQuery`` is supported: the question in
    ``variables.nlQuery`` goes through translate -> execute -> suggest, and
    the answer is always returned with HTTP 200, failures included.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.error("Error parsing request body: %s", e)
        return build_error_response(500, REQUEST_FAILED_MESSAGE, detail=str(e))

    if not isinstance(body, dict):
        return build_error_response(500, REQUEST_FAILED_MESSAGE, detail="Request body must be a JSON object.")

    logger.info("Received request: operationName=%s", body.get("operationName"))

    try:
        nl_query = extract_nl_query(body)
    except InputError as e:
        return build_error_response(400, str(e))

    try:
        result = await orchestrator.process(nl_query)
    except Exception as e:
        logger.error("Unexpected error processing request: %s", e, exc_info=True)
        return build_error_response(500, REQUEST_FAILED_MESSAGE, detail=str(e))

    return build_nl_query_response(result)


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:  # noqa: B008
    """Health check."""
    return HealthResponse(status="healthy", version=settings.app_version)
