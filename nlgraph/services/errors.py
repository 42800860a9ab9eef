"""Pipeline error taxonomy.

Errors are raised inside a component and converted into that component's
result type at its boundary. Only ``InputError`` reaches the HTTP layer.
"""


class PipelineError(Exception):
    """Base class for pipeline errors."""


class InputError(PipelineError):
    """Missing natural language query or unsupported operation (HTTP 400)."""


class SchemaLoadError(PipelineError):
    """Schema source could not be read or parsed. Non-fatal."""


class TranslationError(PipelineError):
    """Empty completion or a generated query that does not parse."""


class ExecutionError(PipelineError):
    """Transport failure, or a query that cannot be framed for execution."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__("; ".join(messages))


class VisualizationError(PipelineError):
    """Malformed or incomplete visualization suggestion."""
