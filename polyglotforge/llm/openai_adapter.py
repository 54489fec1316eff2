"""OpenAI adapter for PolyglotForge."""

from __future__ import annotations

import httpx
import instructor
from openai import APIStatusError, AsyncOpenAI, InternalServerError, RateLimitError
from pydantic import BaseModel

from polyglotforge.llm.base import LLMProvider
from polyglotforge.llm.models import LLMConfig, LLMResponse, TokenUsage


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completions adapter using the async SDK and instructor."""

    name = "openai"
    # OpenAI enforces `response_format={"type": "json_object"}`.
    mode = instructor.Mode.JSON

    def __init__(self, config: LLMConfig, http_client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._client = AsyncOpenAI(
            api_key=config.api_key,  # falls back to OPENAI_API_KEY env var
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0,
            http_client=http_client,
        )

    def is_retryable(self, exc: BaseException) -> bool:
        if isinstance(exc, APIStatusError):
            return isinstance(exc, (RateLimitError, InternalServerError))
        return super().is_retryable(exc)

    async def generate_object(
        self,
        prompt: str,
        schema: type[BaseModel],
        *,
        model: str | None = None,
        max_retries: int = 2,
    ) -> LLMResponse:
        client = instructor.from_openai(self._client, mode=self.mode)
        policy = self.retry_policy(max_retries)
        try:
            value, completion = await client.chat.completions.create_with_completion(
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

        usage = getattr(completion, "usage", None)
        return LLMResponse(
            value=value,
            usage=TokenUsage(
                input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            ),
            model=getattr(completion, "model", None) or model or self.config.model,
            attempts=policy.statistics.get("attempt_number", 1),
        )
