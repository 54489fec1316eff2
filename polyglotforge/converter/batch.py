"""Batch orchestrator: sequential, paced, order-preserving."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from polyglotforge.converter.converter import FileConverter
from polyglotforge.converter.models import ConversionRequest, ConversionResult, ConvertedFile

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_DELAY = 0.2

ProgressCallback = Callable[[int, int, ConvertedFile], None]


class BatchConverter:
    """Drives FileConverter over a request, one file at a time.

    After each file the batch waits `delay` seconds before the next
    provider call. Results are appended in input order; there is no
    per-file error path because FileConverter cannot fail.
    """

    def __init__(
        self,
        converter: FileConverter,
        *,
        delay: float = DEFAULT_REQUEST_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.converter = converter
        self.delay = delay
        self._sleep = sleep

    async def convert(
        self,
        request: ConversionRequest,
        on_progress: ProgressCallback | None = None,
    ) -> ConversionResult:
        total = len(request.files)
        logger.info(
            "Converting %d file(s) to %s (%s)",
            total,
            request.target_language,
            request.target_version,
        )
        results: list[ConvertedFile] = []
        for index, file in enumerate(request.files):
            converted = await self.converter.convert(
                file, request.target_language, request.target_version
            )
            results.append(converted)
            if on_progress is not None:
                on_progress(index + 1, total, converted)
            await self._sleep(self.delay)

        result = ConversionResult(files=results)
        logger.info(
            "Batch done: %d converted, %d fallback",
            result.converted_count,
            result.fallback_count,
        )
        return result
