"""Natural language to GraphQL translator."""

import logging

from graphql import GraphQLSyntaxError, parse

from nlgraph.config.constants import TRANSLATION_EXCERPT_CHARS
from nlgraph.config.prompts import build_translation_prompt
from nlgraph.config.settings import Settings
from nlgraph.infrastructure.llm.client import InferenceClient
from nlgraph.services.errors import TranslationError
from nlgraph.services.translation.models import TranslationResult
from nlgraph.utils.text_processing import strip_code_fence, truncate

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to translate query: "


class QueryTranslator:
    """Generates GraphQL queries from natural language."""

    def __init__(self, settings: Settings, inference: InferenceClient):
        """Initialize translator.

        Args:
            settings: Application settings
            inference: Shared completion service client
        """
        self.settings = settings
        self.inference = inference

    async def translate(
        self,
        nl_query: str,
        schema_context: str | None,
    ) -> TranslationResult:
        """
        Translate a natural language question into a GraphQL query.

        The returned query is guaranteed to parse as GraphQL. It is not checked
        against the schema, so it may reference fields that do not exist.

        Args:
            nl_query: User's natural language question
            schema_context: Schema SDL, or None when unavailable

        Returns:
            TranslationResult with the cleaned query or a TranslationError
        """
        logger.info("Calling LLM to translate: %s", nl_query)
        logger.debug(
            "Using schema context: %s",
            truncate(schema_context, 100) if schema_context else "None",
        )

        prompt = build_translation_prompt(nl_query, schema_context)

        try:
            generated_text = await self.inference.complete(
                prompt,
                temperature=self.settings.translation_temperature,
            )
            query = self._validate(generated_text)
        except TranslationError as e:
            return TranslationResult.failure(TranslationError(f"{FAILURE_PREFIX}{e}"))
        except Exception as e:
            logger.error(f"Error during LLM translation: {e}", exc_info=True)
            return TranslationResult.failure(TranslationError(f"{FAILURE_PREFIX}{e}"))

        logger.info("LLM generated text parsed successfully as GraphQL")
        return TranslationResult.success(query)

    @staticmethod
    def _validate(generated_text: str) -> str:
        """Strip a code fence and check the text parses as a GraphQL document."""
        if not generated_text or not generated_text.strip():
            raise TranslationError("LLM did not return any content.")

        cleaned = strip_code_fence(generated_text.strip())
        try:
            parse(cleaned)
        except GraphQLSyntaxError as e:
            logger.error("LLM returned text that failed GraphQL parsing: %s", cleaned)
            logger.error("Parse error: %s", e.message)
            excerpt = truncate(cleaned, TRANSLATION_EXCERPT_CHARS)
            raise TranslationError(
                f'LLM response could not be parsed as a valid GraphQL query. Response: "{excerpt}"'
            ) from e
        return cleaned
