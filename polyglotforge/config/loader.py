"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .models import PolyglotForgeConfig, ServerConfig


def load_config(cli_path: str | None = None) -> PolyglotForgeConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    A `.env` file in the working directory is loaded first so that both
    `${VAR}` references and the provider key lookup can see its values.
    `PORT` in the environment overrides the configured server port.
    """
    load_dotenv(find_dotenv(usecwd=True))
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./polyglotforge.yaml"),
        Path.home() / ".polyglotforge" / "config.yaml",
    ]

    if cli_path and not Path(cli_path).exists():
        raise ValueError(f"Config file not found: {cli_path}")

    config = PolyglotForgeConfig()
    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                config = PolyglotForgeConfig(**raw)
                break
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return _apply_env_overrides(config)


def _apply_env_overrides(config: PolyglotForgeConfig) -> PolyglotForgeConfig:
    port = os.environ.get("PORT")
    if port:
        try:
            server = ServerConfig.model_validate({**config.server.model_dump(), "port": port})
        except ValidationError as e:
            raise ValueError(f"Invalid PORT value: {port!r}") from e
        config = config.model_copy(update={"server": server})
    return config


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `polyglotforge config init`
DEFAULT_CONFIG_TEMPLATE = """\
# polyglotforge.yaml

# LLM Provider
llm:
  provider: "fireworks"        # fireworks | openai | anthropic
  model: "accounts/sentientfoundation/models/dobby-unhinged-llama-3-3-70b-new"
  api_key_env: "FIREWORKS_API_KEY"
  # base_url: "https://api.fireworks.ai/inference/v1"
  max_tokens: 8192
  temperature: 0.2
  timeout: 120

# Batch conversion
conversion:
  request_delay: 0.2           # seconds between provider calls
  max_retries: 2               # extra attempts per file (rate limits, bad output)
  default_version: "latest"

# HTTP server
server:
  host: "0.0.0.0"
  port: 5050                   # PORT env var wins
  max_body_bytes: 8388608      # 8 MB
  cors_origins: ["*"]

# Output
output:
  archive_name: "polyglotforge-converted.zip"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
