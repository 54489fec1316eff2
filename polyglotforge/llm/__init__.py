"""LLM provider abstraction layer."""

import os

from polyglotforge.config.models import LLMSettings
from polyglotforge.llm.base import LLMProvider
from polyglotforge.llm.claude import ClaudeProvider
from polyglotforge.llm.fireworks import FireworksProvider
from polyglotforge.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage
from polyglotforge.llm.openai_adapter import OpenAIProvider
from polyglotforge.llm.structured import (
    GenerationFailure,
    GenerationOutcome,
    GenerationSuccess,
    StructuredGenerator,
)

_PROVIDER_MAP: dict[str, type[LLMProvider]] = {
    "fireworks": FireworksProvider,
    "openai": OpenAIProvider,
    "anthropic": ClaudeProvider,
}


def create_llm_provider(config: LLMSettings) -> LLMProvider:
    """Create an LLM provider from app-level settings.

    Resolves the API key from the env var in config.api_key_env, then
    bridges the app-level settings to the provider-level LLMConfig.
    """
    cls = _PROVIDER_MAP.get(config.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {config.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )
    api_key = os.environ.get(config.api_key_env)
    if not api_key:
        raise ValueError(
            f"Missing API key: set environment variable {config.api_key_env!r}"
        )
    llm_config = LLMConfig(
        provider=config.provider,
        model=config.model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        timeout=config.timeout,
        api_key=api_key,
        base_url=config.base_url,
    )
    return cls(llm_config)


__all__ = [
    "ClaudeProvider",
    "FireworksProvider",
    "GenerationFailure",
    "GenerationOutcome",
    "GenerationSuccess",
    "LLMConfig",
    "LLMError",
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "StructuredGenerator",
    "TokenUsage",
    "create_llm_provider",
]
