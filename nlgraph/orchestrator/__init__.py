"""Pipeline orchestration."""

from nlgraph.orchestrator.pipeline import PipelineOrchestrator
from nlgraph.orchestrator.state import PipelineResult, PipelineState

__all__ = ["PipelineOrchestrator", "PipelineResult", "PipelineState"]
