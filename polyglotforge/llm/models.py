"""Pydantic models for the LLM subsystem."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class LLMError(Exception):
    """Wraps provider-specific exceptions with context."""

    def __init__(
        self,
        provider: str,
        operation: str,
        cause: BaseException,
        retryable: bool = False,
        attempts: int = 1,
    ) -> None:
        self.provider = provider
        self.operation = operation
        self.retryable = retryable
        self.attempts = attempts
        super().__init__(f"{provider} {operation} failed: {cause}")
        self.__cause__ = cause


class LLMConfig(BaseModel):
    """Runtime configuration handed to a provider adapter."""

    provider: Literal["fireworks", "openai", "anthropic"]
    model: str
    max_tokens: int = 8192
    temperature: float = 0.2
    timeout: float = 120.0
    api_key: str | None = None
    base_url: str | None = None


class TokenUsage(BaseModel):
    """Token usage stats from a single LLM call."""

    input_tokens: int
    output_tokens: int


class LLMResponse(BaseModel):
    """Validated structured reply from a provider."""

    value: Any
    usage: TokenUsage
    model: str
    attempts: int = 1
