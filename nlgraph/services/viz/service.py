"""Visualization advisor service."""

import json
import logging
from typing import Any

from nlgraph.config.constants import CHART_TYPE_ALIASES, ChartType
from nlgraph.config.prompts import build_visualization_prompt
from nlgraph.config.settings import Settings
from nlgraph.infrastructure.llm.client import InferenceClient
from nlgraph.services.errors import VisualizationError
from nlgraph.services.viz.models import FieldMapping, Suggestion, VisualizationSuggestion
from nlgraph.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = ("title", "type", "reasoning")
_MISSING_FIELDS_MESSAGE = (
    "LLM suggestion JSON is missing required fields "
    "(suggestion.{title, type, reasoning, fieldMapping})."
)


def build_data_sample(data: Any, max_chars: int) -> str:
    """Serialize result data and keep only the first ``max_chars`` characters."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)[:max_chars]


def normalize_chart_type(raw_type: str) -> str:
    """Map a model-provided chart type onto the supported set, defaulting to table."""
    key = raw_type.strip().lower()
    try:
        return ChartType(key).value
    except ValueError:
        pass
    if key in CHART_TYPE_ALIASES:
        return CHART_TYPE_ALIASES[key].value
    logger.warning("Unsupported chart type %r suggested, falling back to table", raw_type)
    return ChartType.TABLE.value


class VisualizationAdvisor:
    """Asks the completion service how to chart a query result."""

    def __init__(self, settings: Settings, inference: InferenceClient):
        """Initialize visualization advisor."""
        self.settings = settings
        self.inference = inference

    async def suggest(
        self,
        query: str,
        data: Any,
        nl_query: str,
    ) -> VisualizationSuggestion:
        """
        Suggest a visualization for query results. Never raises.

        Only a prefix of the serialized data (``viz_sample_max_chars``) is
        sent to the completion service.
        """
        logger.info("Calling LLM to suggest visualization...")
        data_sample = build_data_sample(data, self.settings.viz_sample_max_chars)
        prompt = build_visualization_prompt(nl_query, query, data_sample)
        logger.debug("Visualization suggestion prompt (truncated): %s...", prompt[:500])

        try:
            suggestion_json = await self.inference.complete(
                prompt,
                temperature=self.settings.suggestion_temperature,
                json_output=True,
            )
            suggestion = self._parse(suggestion_json)
        except Exception as e:
            logger.error(f"Visualization suggestion error: {e}", exc_info=not isinstance(e, VisualizationError))
            return VisualizationSuggestion(
                suggestion=None,
                error=f"Failed to get visualization suggestion: {e}",
            )

        logger.info("Visualization suggested: %s (%s)", suggestion.type, suggestion.title)
        return VisualizationSuggestion(suggestion=suggestion, error=None)

    @staticmethod
    def _parse(suggestion_json: str) -> Suggestion:
        """Parse and validate the completion text."""
        if not suggestion_json:
            raise VisualizationError("LLM did not return a suggestion JSON.")

        logger.debug("LLM suggestion JSON string: %s", suggestion_json)
        parsed = JSONParser.extract_json(suggestion_json)
        if not parsed:
            raise VisualizationError("LLM suggestion could not be parsed as a JSON object.")

        body = parsed.get("suggestion")
        if (
            not isinstance(body, dict)
            or any(not body.get(field) for field in _REQUIRED_TEXT_FIELDS)
            or body.get("fieldMapping") is None
        ):
            raise VisualizationError(_MISSING_FIELDS_MESSAGE)
        if not isinstance(body["fieldMapping"], dict):
            raise VisualizationError("LLM suggestion fieldMapping must be a JSON object.")

        return Suggestion(
            type=normalize_chart_type(str(body["type"])),
            title=str(body["title"]).strip(),
            reasoning=str(body["reasoning"]).strip(),
            field_mapping=FieldMapping(**body["fieldMapping"]),
        )
