"""
Visualization advisor prompt.
"""

from nlgraph.config.constants import ChartType, FieldRole

_CHART_TYPES = ", ".join(f'"{chart.value}"' for chart in ChartType)

# (what the role means, placeholder shown in the expected JSON)
_ROLE_HINTS: dict[FieldRole, tuple[str, str]] = {
    FieldRole.CATEGORY: ("main category / label / x-axis", "<field_for_category_or_x_axis>"),
    FieldRole.VALUE: ("main numeric value / count / y-axis", "<field_for_value_or_y_axis>"),
    FieldRole.TIME: ("time-based axis (for line charts)", "<field_for_time_series_or_null>"),
}

_ROLE_LINES = "\n".join(
    f'   - "{role.value}": {_ROLE_HINTS[role][0]}.' for role in FieldRole
)
_ROLE_PLACEHOLDERS = ",\n".join(
    f'      "{role.value}": "{_ROLE_HINTS[role][1]}"' for role in FieldRole
)


def build_visualization_prompt(nl_query: str, query: str, data_sample: str) -> str:
    """Build the prompt asking for a chart type and field mapping.

    ``data_sample`` is already truncated by the caller; the model only ever
    sees that prefix of the result.
    """
    return f"""You are an expert data visualization assistant.
Given the following natural language query:
```natural
{nl_query}
```

The following GraphQL query:
```graphql
{query}
```

And a sample of the returned data (first records / summary):
```json
{data_sample}
```

Analyze the query and the structure of the data.
1. Suggest a concise, descriptive title for a chart representing this data (e.g. "Sales by Category", "User Signup Trend").
2. Unless the user specified one, suggest the most appropriate visualization type from this list: [{_CHART_TYPES}]. Use "{ChartType.TABLE.value}" as the default if no chart fits.
3. Suggest the data fields (keys of the JSON sample) for the mapping:
{_ROLE_LINES}
4. Give a one-sentence explanation for the chosen chart type.

Return the suggestion ONLY as a valid JSON object with this exact structure:
{{
  "suggestion": {{
    "title": "<concise_descriptive_title>",
    "type": "<chart_type>",
    "reasoning": "<short_explanation>",
    "fieldMapping": {{
{_ROLE_PLACEHOLDERS}
    }}
  }}
}}
"""
