"""Execution service module."""

from nlgraph.services.execution.executor import QueryExecutor
from nlgraph.services.execution.models import ErrorItem, ExecutionResult

__all__ = ["ErrorItem", "ExecutionResult", "QueryExecutor"]
