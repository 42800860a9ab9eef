"""Schema service module."""

from nlgraph.services.schema.service import SchemaContextProvider

__all__ = ["SchemaContextProvider"]
