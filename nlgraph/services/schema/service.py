"""Schema context provider."""

import asyncio
import logging
from pathlib import Path

from graphql import GraphQLSyntaxError, parse

from nlgraph.config.settings import Settings
from nlgraph.infrastructure.cache.schema_cache import SchemaCache
from nlgraph.services.errors import SchemaLoadError

logger = logging.getLogger(__name__)


class SchemaContextProvider:
    """Loads the GraphQL SDL once and serves it from the shared cache."""

    def __init__(self, settings: Settings, cache: SchemaCache):
        """Initialize schema provider.

        Args:
            settings: Application settings
            cache: Process-wide schema cache, built once at startup
        """
        self.settings = settings
        self.cache = cache
        self.schema_path = Path(settings.schema_file_path)

    async def get_schema_context(self) -> str | None:
        """
        Get the schema SDL for query translation.

        Returns:
            Cached or freshly loaded SDL text, or None when the schema source
            cannot be loaded (translation then runs without schema context).
        """
        cached = self.cache.get()
        if cached is not None:
            logger.debug("Using in-memory schema context")
            return cached

        try:
            sdl = await asyncio.to_thread(self._read_schema)
        except SchemaLoadError as e:
            logger.warning("Schema context unavailable: %s", e)
            return None

        self.cache.set(sdl)
        logger.info(f"Loaded schema context from {self.schema_path}")
        return sdl

    def _read_schema(self) -> str:
        logger.info(f"Attempting to read schema from {self.schema_path}...")
        try:
            sdl = self.schema_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SchemaLoadError(
                f"Schema file not found: {self.schema_path}. "
                "Regenerate it with nlgraph.services.mock_data.export_schema()."
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(f"Failed to read schema file {self.schema_path}: {e}") from e

        if not sdl.strip():
            raise SchemaLoadError(f"Schema file {self.schema_path} is empty")

        try:
            parse(sdl)
        except GraphQLSyntaxError as e:
            raise SchemaLoadError(f"Schema file {self.schema_path} is not valid SDL: {e.message}") from e

        return sdl
