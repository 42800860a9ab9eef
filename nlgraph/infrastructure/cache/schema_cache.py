"""Schema context cache."""

import logging

logger = logging.getLogger(__name__)


class SchemaCache:
    """Single-slot, process-lifetime cache for the schema SDL text.

    One instance is built at startup and shared by every pipeline run. There
    is no TTL and no lock: concurrent cold starts may each load the schema,
    the last write wins and all writes carry the same text.
    """

    def __init__(self) -> None:
        self._value: str | None = None
        self._load_count = 0

    def get(self) -> str | None:
        """Get the cached schema text, or None if nothing was loaded yet."""
        return self._value

    def set(self, value: str) -> None:
        """Store the schema text."""
        self._value = value
        self._load_count += 1
        logger.debug("Schema cache populated (%d chars, load #%d)", len(value), self._load_count)

    @property
    def is_populated(self) -> bool:
        return self._value is not None

    @property
    def load_count(self) -> int:
        """Number of successful loads written to the cache."""
        return self._load_count

    def clear(self) -> None:
        """Drop the cached text. Only used by tests and explicit reloads."""
        self._value = None
        self._load_count = 0
