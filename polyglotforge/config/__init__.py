from .loader import load_config
from .models import (
    ConversionSettings,
    LLMSettings,
    OutputConfig,
    PolyglotForgeConfig,
    ServerConfig,
)

__all__ = [
    "ConversionSettings",
    "LLMSettings",
    "OutputConfig",
    "PolyglotForgeConfig",
    "ServerConfig",
    "load_config",
]
