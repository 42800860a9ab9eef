"""
Retry utilities for handling rate limits and transient errors.
"""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any

from openai import APIConnectionError, APITimeoutError, RateLimitError

logger = logging.getLogger(__name__)


def _get_retry_after(exc: Exception) -> float | None:
    """Extract retry-after seconds from a rate-limit exception, if the server sent one."""
    response = getattr(exc, "response", None)
    if not isinstance(exc, RateLimitError) or response is None:
        return None
    headers = response.headers
    # Try retry-after-ms first (more precise), then retry-after
    retry_ms = headers.get("retry-after-ms")
    if retry_ms:
        try:
            return float(retry_ms) / 1000
        except (TypeError, ValueError):
            pass
    retry_sec = headers.get("retry-after")
    if retry_sec:
        try:
            return float(retry_sec)
        except (TypeError, ValueError):
            pass
    return None


def is_rate_limit_error(exception: Exception) -> bool:
    """Check if an exception is a 429 rate-limit error."""
    if isinstance(exception, RateLimitError):
        return True
    error_str = str(exception).lower()
    return "rate limit" in error_str or "rate_limit" in error_str


def is_transient_error(exception: Exception) -> bool:
    """Check if an exception is a connection/timeout error worth retrying."""
    return isinstance(
        exception,
        (
            TimeoutError,
            asyncio.TimeoutError,
            APIConnectionError,
            APITimeoutError,
        ),
    )


async def run_with_retry(
    func: Callable[[], Awaitable[Any]],
    max_retries: int = 3,
    initial_delay: float = 1.0,
    backoff_factor: float = 2.0,
    retry_on_rate_limit: bool = True,
) -> Any:
    """
    Execute an async function with retry logic for rate limit and transient errors.

    Args:
        func: Async function to execute (no parameters)
        max_retries: Maximum number of attempts
        initial_delay: Initial delay in seconds before first retry
        backoff_factor: Multiplier for delay between retries
        retry_on_rate_limit: Whether to retry on rate limit and transient errors

    Returns:
        Result from the function

    Raises:
        Exception: If max retries exceeded or non-retryable error occurs
    """
    attempts = max(1, max_retries)

    for attempt in range(attempts):
        try:
            return await func()
        except Exception as e:
            is_rate_limit = is_rate_limit_error(e)
            should_retry = (is_rate_limit or is_transient_error(e)) and retry_on_rate_limit

            if not should_retry or attempt >= attempts - 1:
                raise

            wait_time = _get_retry_after(e)
            if wait_time is None:
                wait_time_match = re.search(r"(\d+)\s{0,10}seconds?", str(e), re.IGNORECASE)
                if wait_time_match:
                    wait_time = float(wait_time_match.group(1))
                else:
                    wait_time = initial_delay * (backoff_factor**attempt)

            logger.warning(
                "Transient %s error detected (%s). Attempt %s/%s. Waiting %.1f seconds before retry...",
                "rate limit" if is_rate_limit else "connection/timeout",
                e,
                attempt + 1,
                attempts,
                wait_time,
            )
            await asyncio.sleep(wait_time)

    raise RuntimeError("Max retries exceeded")
