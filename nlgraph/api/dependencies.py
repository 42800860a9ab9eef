"""FastAPI dependencies."""

from fastapi import Request

from nlgraph.orchestrator.pipeline import PipelineOrchestrator


def get_orchestrator(request: Request) -> PipelineOrchestrator:
    """Return the process-wide orchestrator built in the app lifespan."""
    return request.app.state.orchestrator
