"""In-process GraphQL data service backed by fixed sample data."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from graphql import GraphQLSchema, build_schema, graphql, print_schema

from nlgraph.services.mock_data.data import (
    MOCK_SALES,
    MOCK_SIGNUPS,
    MOCK_STATUSES,
    MOCK_USERS,
    TYPE_DEFS,
)

logger = logging.getLogger(__name__)

# Root resolvers: graphql-core's default resolver calls these with ``info``
ROOT_VALUE: dict[str, Any] = {
    "users": lambda _info: MOCK_USERS,
    "salesByCategory": lambda _info: MOCK_SALES,
    "signupsOverTime": lambda _info: MOCK_SIGNUPS,
    "userStatusDistribution": lambda _info: MOCK_STATUSES,
}


@lru_cache
def get_mock_schema() -> GraphQLSchema:
    """Build (once) the executable sample schema."""
    return build_schema(TYPE_DEFS)


async def execute_mock_query(
    query: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> dict[str, Any]:
    """
    Execute a GraphQL document against the sample schema.

    Returns:
        GraphQL response body: {"data": ...} plus "errors" when any occurred
    """
    result = await graphql(
        get_mock_schema(),
        query,
        root_value=ROOT_VALUE,
        variable_values=variables,
        operation_name=operation_name,
    )
    if result.errors:
        logger.warning("Mock data service returned %d error(s)", len(result.errors))
    return result.formatted


def export_schema(path: str | Path) -> Path:
    """Write the sample schema SDL to ``path`` (the schema context file)."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(print_schema(get_mock_schema()) + "\n", encoding="utf-8")
    logger.info(f"Schema exported to {target}")
    return target
