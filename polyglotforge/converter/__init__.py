"""Code conversion subsystem: prompt, single-file converter, batch orchestrator."""

from polyglotforge.config.models import PolyglotForgeConfig
from polyglotforge.converter.batch import BatchConverter
from polyglotforge.converter.converter import FileConverter, fallback_file
from polyglotforge.converter.models import (
    LATEST_VERSION,
    ConversionRequest,
    ConversionResult,
    ConvertedFile,
    ConvertedFileSchema,
    InputFile,
)
from polyglotforge.converter.prompts import build_conversion_prompt
from polyglotforge.llm import LLMProvider, StructuredGenerator, create_llm_provider


def create_batch_converter(
    config: PolyglotForgeConfig, provider: LLMProvider | None = None
) -> BatchConverter:
    """Wire provider -> generator -> file converter -> batch from app config.

    `provider` defaults to the one described by `config.llm`.
    """
    if provider is None:
        provider = create_llm_provider(config.llm)
    converter = FileConverter(
        StructuredGenerator(provider),
        max_retries=config.conversion.max_retries,
    )
    return BatchConverter(converter, delay=config.conversion.request_delay)


__all__ = [
    "BatchConverter",
    "ConversionRequest",
    "ConversionResult",
    "ConvertedFile",
    "ConvertedFileSchema",
    "FileConverter",
    "InputFile",
    "LATEST_VERSION",
    "build_conversion_prompt",
    "create_batch_converter",
    "fallback_file",
]
