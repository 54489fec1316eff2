"""Single-file converter: prompt, generate, fall back on any failure."""

from __future__ import annotations

import logging

from polyglotforge.converter.models import ConvertedFile, ConvertedFileSchema, InputFile
from polyglotforge.converter.prompts import build_conversion_prompt
from polyglotforge.llm.structured import GenerationSuccess, StructuredGenerator

logger = logging.getLogger(__name__)

EMPTY_RESULT_MESSAGE = "Invalid or empty conversion result."


def fallback_file(file: InputFile, message: str) -> ConvertedFile:
    """Original source prefixed with a comment-style failure marker."""
    return ConvertedFile(
        path=file.path or "unknown",
        content=f"/* Dobby failed to convert file: {message} */\n{file.content}",
        status="fallback",
    )


class FileConverter:
    """Converts one file at a time and never raises.

    Every failure (provider error, malformed output, empty fields, or a bug
    further down) is absorbed here and turned into a fallback ConvertedFile
    that carries the original code, so a batch always gets every file back.
    """

    def __init__(
        self,
        generator: StructuredGenerator,
        *,
        model: str | None = None,
        max_retries: int = 2,
    ) -> None:
        self.generator = generator
        self.model = model
        self.max_retries = max_retries

    async def convert(
        self, file: InputFile, target_language: str, target_version: str
    ) -> ConvertedFile:
        try:
            prompt = build_conversion_prompt(file, target_language, target_version)
            outcome = await self.generator.generate(
                prompt,
                ConvertedFileSchema,
                model=self.model,
                max_retries=self.max_retries,
            )
            if not isinstance(outcome, GenerationSuccess):
                message = outcome.message
            elif not outcome.value.content or not outcome.value.path:
                message = EMPTY_RESULT_MESSAGE
            else:
                return ConvertedFile(
                    path=outcome.value.path, content=outcome.value.content
                )
        except Exception as e:  # noqa: BLE001
            logger.exception("Unexpected error converting %s", file.path or "<unnamed>")
            message = str(e) or type(e).__name__

        logger.warning("Conversion failed for %s: %s", file.path or "<unnamed>", message)
        return fallback_file(file, message)
