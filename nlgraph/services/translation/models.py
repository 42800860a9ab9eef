"""Translation service models."""

from dataclasses import dataclass

from nlgraph.services.errors import TranslationError


@dataclass(frozen=True)
class TranslationResult:
    """Either a parseable GraphQL query or the reason translation failed."""

    query: str | None = None
    error: TranslationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.query is not None

    @classmethod
    def success(cls, query: str) -> "TranslationResult":
        return cls(query=query)

    @classmethod
    def failure(cls, error: TranslationError) -> "TranslationResult":
        return cls(error=error)

    def unwrap(self) -> str:
        """Return the query, or raise the carried TranslationError."""
        if self.error is not None:
            raise self.error
        if self.query is None:
            raise TranslationError("Translation produced no query.")
        return self.query
