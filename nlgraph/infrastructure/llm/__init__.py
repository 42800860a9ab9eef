"""LLM infrastructure module."""

from nlgraph.infrastructure.llm.client import InferenceClient

__all__ = ["InferenceClient"]
