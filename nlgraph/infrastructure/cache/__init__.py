"""Cache infrastructure module."""

from nlgraph.infrastructure.cache.schema_cache import SchemaCache

__all__ = ["SchemaCache"]
