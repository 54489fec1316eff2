"""Anthropic Claude adapter for PolyglotForge."""

from __future__ import annotations

import httpx
import instructor
from anthropic import APIStatusError, AsyncAnthropic
from pydantic import BaseModel

from polyglotforge.llm.base import LLMProvider
from polyglotforge.llm.models import LLMConfig, LLMResponse, TokenUsage


class ClaudeProvider(LLMProvider):
    """Claude adapter using the Anthropic async SDK and instructor."""

    name = "claude"

    def __init__(self, config: LLMConfig, http_client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._client = AsyncAnthropic(
            api_key=config.api_key,  # falls back to ANTHROPIC_API_KEY env var
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0,
            http_client=http_client,
        )

    def is_retryable(self, exc: BaseException) -> bool:
        if isinstance(exc, APIStatusError):
            # 429 rate limit, 5xx and 529 overloaded
            return exc.status_code == 429 or exc.status_code >= 500
        return super().is_retryable(exc)

    async def generate_object(
        self,
        prompt: str,
        schema: type[BaseModel],
        *,
        model: str | None = None,
        max_retries: int = 2,
    ) -> LLMResponse:
        client = instructor.from_anthropic(self._client, mode=instructor.Mode.ANTHROPIC_JSON)
        policy = self.retry_policy(max_retries)
        try:
            value, message = await client.messages.create_with_completion(
                model=model or self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=[{"role": "user", "content": prompt}],
                response_model=schema,
                max_retries=policy,
                strict=True,
            )
        except Exception as e:
            raise self._wrap_error(e, policy)

        usage = getattr(message, "usage", None)
        return LLMResponse(
            value=value,
            usage=TokenUsage(
                input_tokens=getattr(usage, "input_tokens", 0) or 0,
                output_tokens=getattr(usage, "output_tokens", 0) or 0,
            ),
            model=getattr(message, "model", None) or model or self.config.model,
            attempts=policy.statistics.get("attempt_number", 1),
        )
