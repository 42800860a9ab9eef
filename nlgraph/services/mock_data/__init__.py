"""Mock GraphQL data service."""

from nlgraph.services.mock_data.service import execute_mock_query, export_schema, get_mock_schema

__all__ = ["execute_mock_query", "export_schema", "get_mock_schema"]
