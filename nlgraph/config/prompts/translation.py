"""
Natural language to GraphQL translation prompt.
"""

from nlgraph.config.constants import SCHEMA_UNAVAILABLE_TEXT

_EXAMPLE_QUESTION = "show all users"
_EXAMPLE_QUERY = """query GetAllUsers {
  users {
    id
    name
    email
  }
}"""


def build_translation_prompt(nl_query: str, schema_context: str | None) -> str:
    """Build the prompt that turns a natural language question into GraphQL."""
    schema_text = schema_context or SCHEMA_UNAVAILABLE_TEXT

    return f"""Given the following GraphQL schema context:
---SCHEMA START---
{schema_text}
---SCHEMA END---

Translate the following natural language query into a valid GraphQL query based *only* on the schema provided.
Return only the GraphQL query, without explanations.

Example:
Natural Language: "{_EXAMPLE_QUESTION}"
GraphQL Query:
```graphql
{_EXAMPLE_QUERY}
```
(End of Example)

Now translate this query:
Natural Language: "{nl_query}"
GraphQL Query:
"""
