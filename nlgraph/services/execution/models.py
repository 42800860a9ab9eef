"""Execution service models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorItem(BaseModel):
    """A single error entry: a message plus optional extra fields."""

    model_config = ConfigDict(extra="allow")

    message: str


class ExecutionResult(BaseModel):
    """Normalized outcome of executing a GraphQL query."""

    data: Any | None = None
    errors: list[ErrorItem] | None = None

    @property
    def succeeded(self) -> bool:
        """True when the query returned data and no errors."""
        return self.data is not None and not self.errors

    @classmethod
    def from_messages(cls, messages: list[str]) -> "ExecutionResult":
        return cls(data=None, errors=[ErrorItem(message=m) for m in messages])
