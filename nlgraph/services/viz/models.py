"""Visualization service models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nlgraph.config.constants import FieldRole


class FieldMapping(BaseModel):
    """Semantic role -> field name. Extra roles are kept as-is."""

    model_config = ConfigDict(extra="allow")

    category: str | None = None
    value: str | None = None
    time: str | None = None

    @field_validator(*(role.value for role in FieldRole), mode="before")
    @classmethod
    def normalize_field_name(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        if not text or text.lower() in {"null", "none"}:
            return None
        return text


class Suggestion(BaseModel):
    """A complete chart suggestion."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    title: str
    reasoning: str
    field_mapping: FieldMapping = Field(alias="fieldMapping")


class VisualizationSuggestion(BaseModel):
    """Advisor output: a suggestion or the reason there is none."""

    suggestion: Suggestion | None = None
    error: str | None = None
