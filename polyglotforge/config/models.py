from pydantic import BaseModel, Field
from typing import Literal


class LLMSettings(BaseModel):
    provider: Literal["fireworks", "openai", "anthropic"] = "fireworks"
    model: str = "accounts/sentientfoundation/models/dobby-unhinged-llama-3-3-70b-new"
    api_key_env: str = "FIREWORKS_API_KEY"
    base_url: str | None = None
    max_tokens: int = Field(default=8192, gt=0)
    temperature: float = Field(default=0.2, ge=0)
    timeout: float = Field(default=120.0, gt=0)


class ConversionSettings(BaseModel):
    request_delay: float = Field(default=0.2, ge=0)
    max_retries: int = Field(default=2, ge=0)
    default_version: str = "latest"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=5050, gt=0, lt=65536)
    max_body_bytes: int = Field(default=8 * 1024 * 1024, gt=0)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class OutputConfig(BaseModel):
    archive_name: str = "polyglotforge-converted.zip"


class PolyglotForgeConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    conversion: ConversionSettings = Field(default_factory=ConversionSettings)
    server: ServerConfig = Field(default_factory=ServerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
