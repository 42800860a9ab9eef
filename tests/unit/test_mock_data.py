"""Tests for the sample GraphQL data service."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from graphql import build_schema, print_schema

from nlgraph.app import app
from nlgraph.config.settings import DEFAULT_SCHEMA_FILE_PATH
from nlgraph.services.mock_data import execute_mock_query, export_schema, get_mock_schema


@pytest.fixture
def client():
    return TestClient(app)


@pytest.mark.asyncio
async def test_users_query():
    result = await execute_mock_query("{ users { id name email } }")

    assert "errors" not in result
    users = result["data"]["users"]
    assert len(users) == 3
    assert users[0] == {"id": "1", "name": "Alice Wonderland", "email": "alice@example.com"}
    assert users[2]["email"] is None


@pytest.mark.asyncio
async def test_named_operation_selected():
    document = "query A { users { id } } query B { salesByCategory { category sales } }"
    result = await execute_mock_query(document, operation_name="B")

    assert result["data"]["salesByCategory"][0] == {"category": "Electronics", "sales": 1500}


@pytest.mark.asyncio
async def test_unknown_field_reports_error():
    result = await execute_mock_query("{ orders { id } }")

    assert result.get("data") is None
    assert "Cannot query field 'orders'" in result["errors"][0]["message"]


def test_exported_schema_matches_bundled_file(tmp_path):
    target = export_schema(tmp_path / "schema.graphql")

    exported = build_schema(target.read_text(encoding="utf-8"))
    bundled = build_schema(Path(DEFAULT_SCHEMA_FILE_PATH).read_text(encoding="utf-8"))
    assert print_schema(exported) == print_schema(bundled)
    assert print_schema(exported) == print_schema(get_mock_schema())


# ==========================================
#  ENDPOINT
# ==========================================


def test_post_endpoint(client):
    response = client.post(
        "/api/mcp-graphql",
        json={"query": "query Signups { signupsOverTime { date count } }", "operationName": "Signups"},
    )

    assert response.status_code == 200
    points = response.json()["data"]["signupsOverTime"]
    assert points[0] == {"date": "2023-10-01", "count": 5}
    assert len(points) == 5


def test_get_endpoint(client):
    response = client.get("/api/mcp-graphql", params={"query": "{ userStatusDistribution { status count } }"})

    assert response.status_code == 200
    statuses = response.json()["data"]["userStatusDistribution"]
    assert statuses[0] == {"status": "Active", "count": 55}


def test_missing_query(client):
    response = client.post("/api/mcp-graphql", json={})

    assert response.status_code == 400
    assert response.json() == {"errors": [{"message": "Must provide query string."}]}


def test_invalid_variables(client):
    response = client.get("/api/mcp-graphql", params={"query": "{ users { id } }", "variables": "{oops"})

    assert response.status_code == 400
