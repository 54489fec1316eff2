"""PolyglotForge - convert source files to another language with an LLM."""

__version__ = "0.1.0"

from polyglotforge.config import PolyglotForgeConfig, load_config  # noqa: E402
from polyglotforge.converter import (  # noqa: E402
    BatchConverter,
    ConversionRequest,
    ConversionResult,
    ConvertedFile,
    FileConverter,
    InputFile,
    create_batch_converter,
)
from polyglotforge.llm import LLMProvider, StructuredGenerator, create_llm_provider  # noqa: E402

__all__ = [
    "BatchConverter",
    "ConversionRequest",
    "ConversionResult",
    "ConvertedFile",
    "FileConverter",
    "InputFile",
    "LLMProvider",
    "PolyglotForgeConfig",
    "StructuredGenerator",
    "create_batch_converter",
    "create_llm_provider",
    "load_config",
]
