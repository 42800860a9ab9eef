"""Translation service module."""

from nlgraph.services.translation.models import TranslationResult
from nlgraph.services.translation.translator import QueryTranslator

__all__ = ["QueryTranslator", "TranslationResult"]
