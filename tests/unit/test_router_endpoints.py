"""Tests for the GraphQL endpoint, health check and request helpers."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from nlgraph.api.dependencies import get_orchestrator
from nlgraph.api.routers.nlq import extract_nl_query
from nlgraph.app import app
from nlgraph.config.constants import (
    DIRECT_QUERY_REMOVED_MESSAGE,
    NL_QUERY_REQUIRED_MESSAGE,
    REQUEST_FAILED_MESSAGE,
)
from nlgraph.orchestrator.state import PipelineResult
from nlgraph.services.errors import InputError
from nlgraph.services.viz.models import VisualizationSuggestion


def _nl_request(nl_query):
    return {
        "operationName": "ProcessNaturalLanguageQuery",
        "query": "query ProcessNaturalLanguageQuery($nlQuery: String!) { processNLQuery(nlQuery: $nlQuery) }",
        "variables": {"nlQuery": nl_query},
    }


@pytest.fixture
def orchestrator():
    orch = AsyncMock()
    orch.process.return_value = PipelineResult(
        data={"users": [{"id": "1", "name": "Alice Wonderland"}]},
        errors=None,
        generated_query="{ users { id name } }",
        visualization=VisualizationSuggestion(suggestion=None, error=None),
    )
    return orch


@pytest.fixture
def client(orchestrator):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================
#  HELPER FUNCTIONS
# ==========================================


def test_extract_nl_query_strips_whitespace():
    assert extract_nl_query(_nl_request("  show all users  ")) == "show all users"


def test_extract_nl_query_missing_variables():
    with pytest.raises(InputError, match=r"nlQuery\) is required"):
        extract_nl_query({"operationName": "ProcessNaturalLanguageQuery"})


def test_extract_nl_query_non_string():
    with pytest.raises(InputError):
        extract_nl_query(_nl_request(42))


# ==========================================
#  GRAPHQL ENDPOINT
# ==========================================


def test_nl_query_success(client, orchestrator):
    response = client.post("/api/graphql", json=_nl_request("show all users"))

    assert response.status_code == 200
    body = response.json()["data"]["processNLQuery"]
    assert body["data"] == {"users": [{"id": "1", "name": "Alice Wonderland"}]}
    assert body["errors"] is None
    assert body["generatedQuery"] == "{ users { id name } }"
    assert body["visualization"] == {"suggestion": None, "error": None}
    orchestrator.process.assert_awaited_once_with("show all users")


def test_pipeline_failure_still_200(client, orchestrator):
    orchestrator.process.return_value = PipelineResult(
        data=None,
        errors=[{"message": "Connection refused"}],
        generated_query="{ users { id } }",
    )

    response = client.post("/api/graphql", json=_nl_request("show all users"))

    assert response.status_code == 200
    body = response.json()["data"]["processNLQuery"]
    assert body["data"] is None
    assert body["errors"] == [{"message": "Connection refused"}]


@pytest.mark.parametrize("nl_query", ["", "   ", None])
def test_empty_nl_query_is_400(client, orchestrator, nl_query):
    response = client.post("/api/graphql", json=_nl_request(nl_query))

    assert response.status_code == 400
    assert response.json() == {"errors": [{"message": NL_QUERY_REQUIRED_MESSAGE}]}
    orchestrator.process.assert_not_awaited()


def test_direct_query_removed(client, orchestrator):
    response = client.post(
        "/api/graphql",
        json={"operationName": "ProcessDirectQuery", "variables": {"query": "{ users { id } }"}},
    )

    assert response.status_code == 400
    assert response.json() == {"errors": [{"message": DIRECT_QUERY_REMOVED_MESSAGE}]}
    orchestrator.process.assert_not_awaited()


def test_unknown_operation(client):
    response = client.post("/api/graphql", json={"operationName": "DropTables", "variables": {}})

    assert response.status_code == 400
    message = response.json()["errors"][0]["message"]
    assert "Unknown operation name: DropTables" in message


def test_missing_operation_name(client, orchestrator):
    response = client.post("/api/graphql", json={"variables": {"nlQuery": "show all users"}})

    assert response.status_code == 400
    assert response.json() == {
        "errors": [
            {
                "message": "Unknown operation name: <missing>. "
                "Supported operations: ProcessNaturalLanguageQuery."
            }
        ]
    }
    orchestrator.process.assert_not_awaited()


def test_malformed_json_is_500(client):
    response = client.post(
        "/api/graphql",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    error = response.json()["errors"][0]
    assert error["message"] == REQUEST_FAILED_MESSAGE
    assert error["detail"]


def test_orchestrator_crash_is_500(client, orchestrator):
    orchestrator.process.side_effect = Exception("Pipeline failed")

    response = client.post("/api/graphql", json=_nl_request("show all users"))

    assert response.status_code == 500
    assert response.json()["errors"][0] == {"message": REQUEST_FAILED_MESSAGE, "detail": "Pipeline failed"}


# ==========================================
#  HEALTH
# ==========================================


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
