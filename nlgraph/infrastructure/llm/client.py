"""Completion service client."""

import asyncio
import logging
from typing import Any

from openai import AsyncOpenAI

from nlgraph.config.settings import Settings
from nlgraph.utils.retry import run_with_retry

logger = logging.getLogger(__name__)


class InferenceClient:
    """
    Thin wrapper over the OpenAI chat-completions API.

    Shared by the translator and the visualization advisor. Every call is
    bounded by ``settings.inference_timeout`` and retried on rate-limit and
    connection errors.

    Usage:
        client = InferenceClient(settings)
        text = await client.complete(prompt, temperature=0.1)
        await client.close()
    """

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None):
        """Initialize inference client.

        Args:
            settings: Application settings
            client: Optional pre-built AsyncOpenAI client (tests)
        """
        self.settings = settings
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        # Built lazily so a missing API key surfaces as a failed call, not a failed startup
        if self._client is None:
            logger.debug(f"Creating AsyncOpenAI client for model: {self.settings.inference_model}")
            self._client = AsyncOpenAI(
                api_key=self.settings.openai_api_key,
                base_url=self.settings.openai_base_url,
                max_retries=0,
            )
        return self._client

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        json_output: bool = False,
    ) -> str:
        """
        Send a single user prompt and return the completion text.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature for this call site
            json_output: Ask the service for a single JSON object

        Returns:
            Stripped completion text, or "" when the service returned no content
        """
        request: dict[str, Any] = {
            "model": self.settings.inference_model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
        }
        if json_output:
            request["response_format"] = {"type": "json_object"}

        async def _call() -> str:
            client = self._get_client()
            completion = await asyncio.wait_for(
                client.chat.completions.create(**request),
                timeout=self.settings.inference_timeout,
            )
            if not completion.choices:
                return ""
            content = completion.choices[0].message.content
            return content.strip() if content else ""

        return await run_with_retry(
            _call,
            max_retries=self.settings.inference_max_retries,
            initial_delay=self.settings.inference_retry_delay,
            backoff_factor=self.settings.retry_backoff_factor,
            retry_on_rate_limit=True,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.close()
            self._client = None
