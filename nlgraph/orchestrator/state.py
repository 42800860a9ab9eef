"""Pipeline state and result models."""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from nlgraph.config.constants import PipelineStep
from nlgraph.services.execution.models import ErrorItem, ExecutionResult
from nlgraph.services.viz.models import VisualizationSuggestion


@dataclass
class PipelineState:
    """State object passed through the pipeline."""

    # Input
    user_message: str
    step: PipelineStep = PipelineStep.PARSING_INPUT

    # Schema
    schema_loaded: bool = False

    # Translation
    generated_query: Optional[str] = None

    # Execution
    execution: Optional[ExecutionResult] = None

    # Suggestion
    visualization: Optional[VisualizationSuggestion] = None

    # Failure reason when step == FAILED
    error: Optional[str] = None


class PipelineResult(BaseModel):
    """Aggregate answer of one pipeline run."""

    model_config = ConfigDict(populate_by_name=True)

    data: Any | None = None
    errors: list[ErrorItem] | None = None
    generated_query: str | None = Field(default=None, alias="generatedQuery")
    visualization: VisualizationSuggestion = Field(default_factory=VisualizationSuggestion)

    def to_response(self) -> dict[str, Any]:
        """Dump with wire (camelCase) field names."""
        return self.model_dump(by_alias=True)
