"""
Constants, enums, and static values.
"""

from enum import Enum


class Operation(str, Enum):
    """Operation names accepted by the inbound GraphQL endpoint."""

    PROCESS_NL_QUERY = "ProcessNaturalLanguageQuery"
    PROCESS_DIRECT_QUERY = "ProcessDirectQuery"  # Removed, answered with 400


class ChartType(str, Enum):
    """Chart types the advisor may suggest."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    TABLE = "table"


# Older prompt vocabulary still returned by some models
CHART_TYPE_ALIASES: dict[str, ChartType] = {
    "barchart": ChartType.BAR,
    "bar_chart": ChartType.BAR,
    "linechart": ChartType.LINE,
    "line_chart": ChartType.LINE,
    "piechart": ChartType.PIE,
    "pie_chart": ChartType.PIE,
    "datatable": ChartType.TABLE,
}


class FieldRole(str, Enum):
    """Semantic roles of a field mapping."""

    CATEGORY = "category"
    VALUE = "value"
    TIME = "time"


class PipelineStep(str, Enum):
    """Pipeline execution steps."""

    PARSING_INPUT = "parsing_input"
    SCHEMA = "schema"
    TRANSLATING = "translating"
    EXECUTING = "executing"
    SUGGESTING = "suggesting"
    DONE = "done"
    FAILED = "failed"


class PipelineStepDescription(str, Enum):
    """Pipeline execution step descriptions."""

    PARSING_INPUT = "Extract the natural language query from the request"
    SCHEMA = "Load the GraphQL schema context"
    TRANSLATING = "Translate the natural language query into GraphQL"
    EXECUTING = "Execute the generated GraphQL query"
    SUGGESTING = "Suggest a visualization for the returned data"


# Messages
NL_QUERY_REQUIRED_MESSAGE = "Natural language query (nlQuery) is required."
DIRECT_QUERY_REMOVED_MESSAGE = "Direct query functionality has been removed."
REQUEST_FAILED_MESSAGE = "Failed to process request."
EXECUTION_FALLBACK_MESSAGE = (
    "Failed to execute query against internal endpoint or unknown error format."
)
UNKNOWN_ENDPOINT_ERROR_MESSAGE = "Unknown error from MCP response"
PIPELINE_FALLBACK_MESSAGE = "An unknown error occurred during NL processing."
SCHEMA_UNAVAILABLE_TEXT = "Schema context not available."

# Length of the generated-text excerpt carried by translation errors
TRANSLATION_EXCERPT_CHARS = 100


def unknown_operation_message(operation_name: object) -> str:
    name = "<missing>" if operation_name is None else operation_name
    return (
        f"Unknown operation name: {name}. "
        f"Supported operations: {Operation.PROCESS_NL_QUERY.value}."
    )
