"""Schema-constrained generation on top of an LLM provider.

Providers do the structured call through instructor and raise LLMError.
This module is the seam the converter sees: every outcome, including an
unexpected adapter crash, comes back as a value instead of an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

from polyglotforge.llm.base import LLMProvider
from polyglotforge.llm.models import LLMError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class GenerationSuccess(Generic[T]):
    value: T
    attempts: int
    model: str


@dataclass(frozen=True)
class GenerationFailure:
    message: str
    attempts: int
    retryable: bool = False


GenerationOutcome = Union[GenerationSuccess[Any], GenerationFailure]


class StructuredGenerator:
    """Submit a prompt plus schema, get back a validated object or a failure."""

    def __init__(self, provider: LLMProvider) -> None:
        self.provider = provider

    async def generate(
        self,
        prompt: str,
        schema: type[T],
        *,
        model: str | None = None,
        max_retries: int = 2,
    ) -> GenerationOutcome:
        """Run up to `max_retries + 1` attempts.

        Non-retryable provider errors (auth, bad request) stop immediately;
        rate limits, server errors and malformed output are retried.
        """
        try:
            response = await self.provider.generate_object(
                prompt, schema, model=model, max_retries=max_retries
            )
        except LLMError as e:
            logger.debug("generation failed after %d attempt(s): %s", e.attempts, e)
            return GenerationFailure(message=str(e), attempts=e.attempts, retryable=e.retryable)
        except Exception as e:  # noqa: BLE001
            logger.warning("%s provider raised %s", self.provider.name, type(e).__name__, exc_info=True)
            return GenerationFailure(message=str(e) or type(e).__name__, attempts=1)

        return GenerationSuccess(
            value=response.value, attempts=response.attempts, model=response.model
        )
