"""Abstract LLM interface for PolyglotForge."""

from __future__ import annotations

from abc import ABC, abstractmethod

from instructor.exceptions import InstructorRetryException
from pydantic import BaseModel
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt

from polyglotforge.llm.models import LLMConfig, LLMError, LLMResponse


class LLMProvider(ABC):
    """Provider-agnostic interface for schema-constrained completions.

    Adapters hand the pydantic schema to instructor, which renders it into
    the request, validates the reply and re-asks on malformed output. The
    retry policy built here is the only retry layer: SDK clients are
    created with their own retries disabled.
    """

    name: str = "base"

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate_object(
        self,
        prompt: str,
        schema: type[BaseModel],
        *,
        model: str | None = None,
        max_retries: int = 2,
    ) -> LLMResponse:
        """Generate one object validated against `schema`.

        Makes at most `max_retries + 1` requests. Raises LLMError when the
        SDK call fails or every attempt produced unusable output.
        """
        ...

    def is_retryable(self, exc: BaseException) -> bool:
        """Whether another attempt may succeed after `exc`."""
        return isinstance(exc, Exception)

    def retry_policy(self, max_retries: int) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(max_retries + 1),
            retry=retry_if_exception(self.is_retryable),
        )

    def _wrap_error(self, e: Exception, policy: AsyncRetrying) -> LLMError:
        """Map an SDK or instructor exception to LLMError."""
        if isinstance(e, InstructorRetryException):
            cause = e.args[0] if e.args and isinstance(e.args[0], BaseException) else e
            return LLMError(
                self.name,
                "generate",
                cause,
                retryable=self.is_retryable(cause),
                attempts=e.n_attempts,
            )
        return LLMError(
            self.name,
            "generate",
            e,
            retryable=self.is_retryable(e),
            attempts=policy.statistics.get("attempt_number", 1),
        )
