"""GraphQL query executor."""

import logging
from typing import Any

import httpx
from graphql import GraphQLSyntaxError, OperationDefinitionNode, parse

from nlgraph.config.constants import EXECUTION_FALLBACK_MESSAGE, UNKNOWN_ENDPOINT_ERROR_MESSAGE
from nlgraph.config.settings import Settings
from nlgraph.services.errors import ExecutionError
from nlgraph.services.execution.models import ErrorItem, ExecutionResult

logger = logging.getLogger(__name__)


# Marks a body that could not be decoded, distinct from a JSON null
_NOT_JSON = object()


def _exception_message(exc: BaseException) -> str:
    return str(exc).strip() or EXECUTION_FALLBACK_MESSAGE


def _has_protocol_errors(body: Any) -> bool:
    """True when the body carries a GraphQL ``errors`` list of error objects."""
    if not isinstance(body, dict):
        return False
    errors = body.get("errors")
    return isinstance(errors, list) and len(errors) > 0 and isinstance(errors[0], dict)


class QueryExecutor:
    """
    Executes GraphQL queries against the configured execution endpoint.

    Transport failures and GraphQL errors are both reported through
    ``ExecutionResult.errors``; ``execute`` never raises.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        """Initialize executor.

        Args:
            settings: Application settings
            http_client: Optional pre-built client (tests inject a MockTransport)
        """
        self.settings = settings
        self.endpoint = settings.mcp_endpoint
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.execution_timeout)

    async def close(self) -> None:
        """Close the HTTP client (only if we own it)."""
        if self._owns_client:
            await self._client.aclose()

    def _build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.mcp_api_token:
            headers["Authorization"] = f"Bearer {self.settings.mcp_api_token}"
        return headers

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> ExecutionResult:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL document (already validated by the translator)
            variables: Optional operation variables

        Returns:
            ExecutionResult with either data or errors populated
        """
        logger.info("Executing query against %s", self.endpoint)
        logger.debug("Query: %s | variables: %s", query, variables)

        try:
            payload = self._frame(query, variables)
            body = await self._post(payload)
        except ExecutionError as e:
            logger.error(f"Error executing query against {self.endpoint}: {e}")
            return ExecutionResult.from_messages(e.messages)
        except Exception as e:
            logger.error(f"Unexpected error executing query against {self.endpoint}: {e}", exc_info=True)
            return ExecutionResult.from_messages([_exception_message(e)])

        return self._classify(body)

    @staticmethod
    def _frame(query: str, variables: dict[str, Any] | None) -> dict[str, Any]:
        """Parse the query and build the GraphQL-over-HTTP payload."""
        try:
            document = parse(query)
        except GraphQLSyntaxError as e:
            raise ExecutionError([f"Syntax Error: {e.message}"]) from e

        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        operations = [d for d in document.definitions if isinstance(d, OperationDefinitionNode)]
        if len(operations) == 1 and operations[0].name is not None:
            payload["operationName"] = operations[0].name.value
        return payload

    async def _post(self, payload: dict[str, Any]) -> Any:
        """Send the payload and return the decoded JSON body."""
        try:
            response = await self._client.post(
                self.endpoint,
                json=payload,
                headers=self._build_headers(),
            )
        except httpx.HTTPError as e:
            raise ExecutionError([_exception_message(e)]) from e

        try:
            body = response.json()
        except ValueError:
            body = _NOT_JSON

        if response.is_success:
            if body is _NOT_JSON:
                raise ExecutionError(
                    [f"Execution endpoint returned a non-JSON response (HTTP {response.status_code})."]
                )
            if body is None:
                raise ExecutionError(
                    [f"Execution endpoint returned an empty (null) JSON body (HTTP {response.status_code})."]
                )
            return body

        # Non-2xx responses still count as GraphQL errors when the body says so
        if _has_protocol_errors(body):
            return body

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExecutionError([_exception_message(e)]) from e
        raise ExecutionError([EXECUTION_FALLBACK_MESSAGE])

    @staticmethod
    def _classify(body: Any) -> ExecutionResult:
        """Map a decoded response body to data or errors."""
        if _has_protocol_errors(body):
            logger.warning("Execution endpoint returned errors within the response object: %s", body["errors"])
            errors = [
                ErrorItem(message=str(entry.get("message") or UNKNOWN_ENDPOINT_ERROR_MESSAGE))
                if isinstance(entry, dict)
                else ErrorItem(message=UNKNOWN_ENDPOINT_ERROR_MESSAGE)
                for entry in body["errors"]
            ]
            return ExecutionResult(data=None, errors=errors)

        # Unwrap the GraphQL envelope; any other body is the data itself
        if isinstance(body, dict) and "data" in body:
            data = body["data"]
        else:
            data = body

        logger.info("Query executed successfully")
        return ExecutionResult(data=data, errors=None)
