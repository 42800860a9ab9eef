"""Tests for retry helpers."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from nlgraph.utils.retry import is_rate_limit_error, is_transient_error, run_with_retry


def test_rate_limit_detected_from_message():
    assert is_rate_limit_error(Exception("Rate limit reached, retry in 2 seconds"))
    assert not is_rate_limit_error(ValueError("boom"))


def test_timeouts_are_transient():
    assert is_transient_error(asyncio.TimeoutError())
    assert not is_transient_error(ValueError("boom"))


@pytest.mark.asyncio
async def test_returns_first_success():
    func = AsyncMock(return_value="ok")
    assert await run_with_retry(func, max_retries=3) == "ok"
    assert func.await_count == 1


@pytest.mark.asyncio
@patch("nlgraph.utils.retry.asyncio.sleep", new_callable=AsyncMock)
async def test_retries_transient_error(mock_sleep):
    func = AsyncMock(side_effect=[asyncio.TimeoutError(), "ok"])
    result = await run_with_retry(func, max_retries=3, initial_delay=0.5)
    assert result == "ok"
    assert func.await_count == 2
    mock_sleep.assert_awaited_once_with(0.5)


@pytest.mark.asyncio
@patch("nlgraph.utils.retry.asyncio.sleep", new_callable=AsyncMock)
async def test_rate_limit_wait_parsed_from_message(mock_sleep):
    func = AsyncMock(side_effect=[Exception("rate limit exceeded, try again in 7 seconds"), "ok"])
    await run_with_retry(func, max_retries=2)
    mock_sleep.assert_awaited_once_with(7.0)


@pytest.mark.asyncio
async def test_non_retryable_error_raised_immediately():
    func = AsyncMock(side_effect=ValueError("bad request"))
    with pytest.raises(ValueError):
        await run_with_retry(func, max_retries=3)
    assert func.await_count == 1


@pytest.mark.asyncio
@patch("nlgraph.utils.retry.asyncio.sleep", new_callable=AsyncMock)
async def test_gives_up_after_max_retries(mock_sleep):
    func = AsyncMock(side_effect=asyncio.TimeoutError())
    with pytest.raises(asyncio.TimeoutError):
        await run_with_retry(func, max_retries=2, initial_delay=0.1)
    assert func.await_count == 2
