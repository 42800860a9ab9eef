"""Visualization service module."""

from nlgraph.services.viz.models import FieldMapping, Suggestion, VisualizationSuggestion
from nlgraph.services.viz.service import VisualizationAdvisor

__all__ = ["FieldMapping", "Suggestion", "VisualizationAdvisor", "VisualizationSuggestion"]
