"""Main pipeline orchestrator."""

import asyncio
import logging

from nlgraph.config.constants import (
    NL_QUERY_REQUIRED_MESSAGE,
    PIPELINE_FALLBACK_MESSAGE,
    PipelineStep,
)
from nlgraph.config.settings import Settings
from nlgraph.infrastructure.cache.schema_cache import SchemaCache
from nlgraph.infrastructure.llm.client import InferenceClient
from nlgraph.infrastructure.logging.logger import StructuredLogger
from nlgraph.orchestrator.state import PipelineResult, PipelineState
from nlgraph.orchestrator.step_timer import timed_step
from nlgraph.services.execution.executor import QueryExecutor
from nlgraph.services.execution.models import ErrorItem
from nlgraph.services.schema.service import SchemaContextProvider
from nlgraph.services.translation.translator import QueryTranslator
from nlgraph.services.viz.models import VisualizationSuggestion
from nlgraph.services.viz.service import VisualizationAdvisor

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Orchestrates translate -> execute -> suggest for one natural language query.

    ``process`` always returns a PipelineResult; failures are expressed in
    its fields, never as exceptions.
    """

    def __init__(
        self,
        settings: Settings,
        schema_provider: SchemaContextProvider,
        translator: QueryTranslator,
        executor: QueryExecutor,
        advisor: VisualizationAdvisor,
        inference: InferenceClient | None = None,
    ):
        """Initialize orchestrator with its collaborators."""
        self.settings = settings
        self.schema_provider = schema_provider
        self.translator = translator
        self.executor = executor
        self.advisor = advisor
        self.inference = inference
        self.structured_logger = StructuredLogger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        schema_cache: SchemaCache | None = None,
    ) -> "PipelineOrchestrator":
        """Build the orchestrator and the clients it owns."""
        inference = InferenceClient(settings)
        return cls(
            settings=settings,
            schema_provider=SchemaContextProvider(settings, schema_cache or SchemaCache()),
            translator=QueryTranslator(settings, inference),
            executor=QueryExecutor(settings),
            advisor=VisualizationAdvisor(settings, inference),
            inference=inference,
        )

    async def close(self) -> None:
        """Close all service connections and cleanup resources."""
        try:
            await self.executor.close()
            if self.inference is not None:
                await self.inference.close()
            logger.info("Pipeline resources closed")
        except Exception as e:
            logger.error(f"Error closing pipeline resources: {e}", exc_info=True)

    async def process(self, nl_query: str) -> PipelineResult:
        """
        Run the pipeline for one natural language query.

        Args:
            nl_query: User's natural language question

        Returns:
            PipelineResult with data, errors, generated query and visualization
        """
        state = PipelineState(user_message=nl_query)
        try:
            return await asyncio.wait_for(
                self._run(state),
                timeout=self.settings.pipeline_timeout,
            )
        except asyncio.TimeoutError as e:
            self.structured_logger.log_error(state.step.value, e, {"timeout": self.settings.pipeline_timeout})
            return self._failed(
                state,
                f"Pipeline timed out after {self.settings.pipeline_timeout} seconds.",
            )
        except Exception as e:
            self.structured_logger.log_error(state.step.value, e, {"nl_query": nl_query})
            return self._failed(state, str(e) or PIPELINE_FALLBACK_MESSAGE)

    async def _run(self, state: PipelineState) -> PipelineResult:
        nl_query = (state.user_message or "").strip()
        if not nl_query:
            return self._failed(state, NL_QUERY_REQUIRED_MESSAGE)
        logger.info("Processing Natural Language Query: %s", nl_query)

        state.step = PipelineStep.SCHEMA
        async with timed_step(PipelineStep.SCHEMA, self.structured_logger) as step:
            schema_context = await self.schema_provider.get_schema_context()
            state.schema_loaded = schema_context is not None
            step.set_result(schema_loaded=state.schema_loaded)

        state.step = PipelineStep.TRANSLATING
        async with timed_step(PipelineStep.TRANSLATING, self.structured_logger) as step:
            translation = await self.translator.translate(nl_query, schema_context)
            step.set_result(ok=translation.ok, query=translation.query)
        if not translation.ok:
            return self._failed(state, str(translation.error) or PIPELINE_FALLBACK_MESSAGE)

        query = translation.unwrap()
        state.generated_query = query
        logger.info("Generated GraphQL Query: %s", query)

        state.step = PipelineStep.EXECUTING
        async with timed_step(PipelineStep.EXECUTING, self.structured_logger) as step:
            execution = await self.executor.execute(query)
            state.execution = execution
            step.set_result(succeeded=execution.succeeded, error_count=len(execution.errors or []))

        if execution.succeeded:
            state.step = PipelineStep.SUGGESTING
            async with timed_step(PipelineStep.SUGGESTING, self.structured_logger) as step:
                visualization = await self.advisor.suggest(query, execution.data, nl_query)
                step.set_result(
                    type=visualization.suggestion.type if visualization.suggestion else None,
                    error=visualization.error,
                )
        else:
            visualization = VisualizationSuggestion(suggestion=None, error=None)
        state.visualization = visualization

        state.step = PipelineStep.DONE
        return PipelineResult(
            data=execution.data,
            errors=execution.errors,
            generated_query=query,
            visualization=visualization,
        )

    @staticmethod
    def _failed(state: PipelineState, message: str) -> PipelineResult:
        """Build the FAILED result: no data, the message as the only error."""
        logger.error("Pipeline failed during %s: %s", state.step.value, message)
        state.step = PipelineStep.FAILED
        state.error = message
        return PipelineResult(
            data=None,
            errors=[ErrorItem(message=message)],
            generated_query=state.generated_query,
            visualization=VisualizationSuggestion(suggestion=None, error=message),
        )
