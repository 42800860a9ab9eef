"""Tests for QueryTranslator."""

import pytest

from nlgraph.services.errors import TranslationError
from nlgraph.services.translation.translator import FAILURE_PREFIX, QueryTranslator


@pytest.fixture
def translator(settings, inference):
    return QueryTranslator(settings, inference)


@pytest.mark.asyncio
async def test_fenced_query_is_cleaned(translator, inference, users_query):
    inference.complete.return_value = f"```graphql\n{users_query}\n```"

    result = await translator.translate("show all users", "type Query { users: [User] }")

    assert result.ok
    assert result.query == users_query
    assert result.unwrap() == users_query


@pytest.mark.asyncio
async def test_uses_translation_temperature(translator, inference, settings, users_query):
    inference.complete.return_value = users_query

    await translator.translate("show all users", None)

    prompt = inference.complete.await_args.args[0]
    assert inference.complete.await_args.kwargs["temperature"] == settings.translation_temperature
    assert 'Natural Language: "show all users"' in prompt
    assert "Schema context not available." in prompt


@pytest.mark.asyncio
async def test_schema_context_in_prompt(translator, inference, users_query):
    inference.complete.return_value = users_query

    await translator.translate("show all users", "type Query { users: [User] }")

    prompt = inference.complete.await_args.args[0]
    assert "---SCHEMA START---\ntype Query { users: [User] }\n---SCHEMA END---" in prompt


@pytest.mark.asyncio
async def test_unparseable_output_carries_excerpt(translator, inference):
    generated = "SELECT * FROM users WHERE " + "x" * 200
    inference.complete.return_value = generated

    result = await translator.translate("list users", None)

    assert not result.ok
    assert result.query is None
    assert str(result.error) == (
        f"{FAILURE_PREFIX}LLM response could not be parsed as a valid GraphQL query. "
        f'Response: "{generated[:100]}..."'
    )


@pytest.mark.asyncio
async def test_empty_completion(translator, inference):
    inference.complete.return_value = ""

    result = await translator.translate("list users", None)

    assert not result.ok
    assert str(result.error) == f"{FAILURE_PREFIX}LLM did not return any content."


@pytest.mark.asyncio
async def test_service_failure_becomes_translation_error(translator, inference):
    inference.complete.side_effect = RuntimeError("service unavailable")

    result = await translator.translate("list users", None)

    assert isinstance(result.error, TranslationError)
    assert str(result.error) == f"{FAILURE_PREFIX}service unavailable"
    with pytest.raises(TranslationError):
        result.unwrap()


@pytest.mark.asyncio
async def test_schema_mismatch_is_not_rejected(translator, inference):
    # Parsed only, never validated against the schema
    inference.complete.return_value = "{ nonexistentField { id } }"

    result = await translator.translate("anything", "type Query { users: [User] }")

    assert result.ok
    assert result.query == "{ nonexistentField { id } }"
