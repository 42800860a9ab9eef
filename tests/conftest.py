"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from nlgraph.config.settings import Settings
from nlgraph.infrastructure.cache.schema_cache import SchemaCache

USERS_QUERY = """query GetAllUsers {
  users {
    id
    name
    email
  }
}"""

USERS_SUGGESTION_JSON = """{
  "suggestion": {
    "title": "All Users",
    "type": "table",
    "reasoning": "A list of records with text fields is best shown as a table.",
    "fieldMapping": {"category": "name", "value": null, "time": null}
  }
}"""


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's .env file."""
    values = dict(
        openai_api_key="test-key",
        mcp_endpoint="http://mcp.test/api/mcp-graphql",
        inference_max_retries=1,
        inference_retry_delay=0.01,
        pipeline_timeout=5.0,
        allowed_origins=["http://localhost:3000"],
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return make_settings()


@pytest.fixture
def schema_cache():
    return SchemaCache()


@pytest.fixture
def inference():
    """Completion service stand-in; tests set ``complete`` return values."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value="")
    return client


@pytest.fixture
def settings_factory():
    """Build settings with per-test overrides."""
    return make_settings


@pytest.fixture
def users_query():
    return USERS_QUERY


@pytest.fixture
def users_suggestion_json():
    return USERS_SUGGESTION_JSON
