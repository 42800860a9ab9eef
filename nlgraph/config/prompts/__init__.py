"""Prompts for the NL to GraphQL pipeline."""

from nlgraph.config.prompts.translation import build_translation_prompt
from nlgraph.config.prompts.viz import build_visualization_prompt

__all__ = [
    "build_translation_prompt",
    "build_visualization_prompt",
]
