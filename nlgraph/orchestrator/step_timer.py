"""Async context manager for timing and logging pipeline steps."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from nlgraph.config.constants import PipelineStep, PipelineStepDescription
from nlgraph.infrastructure.logging.logger import StructuredLogger

logger = logging.getLogger(__name__)


class StepContext:
    """Mutable context for a timed pipeline step."""

    def __init__(self) -> None:
        self.result: dict[str, Any] = {}

    def set_result(self, **result: Any) -> None:
        self.result.update(result)


@asynccontextmanager
async def timed_step(
    step: PipelineStep,
    structured_logger: StructuredLogger,
) -> AsyncGenerator[StepContext, None]:
    """Time a pipeline step and log its result."""
    logger.info(f"{step.value}: {PipelineStepDescription[step.name].value}")
    ctx = StepContext()
    start = time.perf_counter()
    try:
        yield ctx
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        structured_logger.log_step(step.value, ctx.result, duration_ms=elapsed_ms)
