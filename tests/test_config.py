"""Tests for polyglotforge.config — models and YAML loader."""

import pytest
from pydantic import ValidationError

from polyglotforge.config.loader import DEFAULT_CONFIG_TEMPLATE, _expand_env_vars, load_config
from polyglotforge.config.models import (
    ConversionSettings,
    LLMSettings,
    PolyglotForgeConfig,
    ServerConfig,
)


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run with an empty cwd and HOME so no stray config is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("PORT", raising=False)
    return tmp_path


# ── Defaults ───────────────────────────────────────────────────────


class TestDefaults:
    def test_llm_defaults(self, sample_config):
        assert sample_config.llm.provider == "fireworks"
        assert sample_config.llm.api_key_env == "FIREWORKS_API_KEY"
        assert "dobby" in sample_config.llm.model

    def test_conversion_defaults(self, sample_config):
        assert sample_config.conversion.request_delay == 0.2
        assert sample_config.conversion.max_retries == 2
        assert sample_config.conversion.default_version == "latest"

    def test_server_defaults(self, sample_config):
        assert sample_config.server.port == 5050
        assert sample_config.server.max_body_bytes == 8 * 1024 * 1024
        assert sample_config.server.cors_origins == ["*"]

    def test_logging_defaults(self, sample_config):
        assert sample_config.log_level == "info"
        assert sample_config.log_format == "text"


class TestValidation:
    def test_invalid_provider_rejected(self):
        with pytest.raises(ValidationError):
            LLMSettings(provider="badprovider")

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            ConversionSettings(request_delay=-1)

    def test_port_range(self):
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            PolyglotForgeConfig(log_level="loud")


# ── Loader ─────────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_file(self, isolated):
        assert load_config() == PolyglotForgeConfig()

    def test_project_local_file(self, isolated):
        (isolated / "polyglotforge.yaml").write_text(
            "llm:\n  provider: openai\n  model: gpt-4o\nconversion:\n  request_delay: 1.5\n"
        )
        cfg = load_config()
        assert cfg.llm.provider == "openai"
        assert cfg.conversion.request_delay == 1.5

    def test_cli_path_wins(self, isolated):
        (isolated / "polyglotforge.yaml").write_text("log_level: debug\n")
        custom = isolated / "custom.yaml"
        custom.write_text("log_level: error\n")
        assert load_config(str(custom)).log_level == "error"

    def test_missing_cli_path_raises(self, isolated):
        with pytest.raises(ValueError, match="not found"):
            load_config(str(isolated / "nope.yaml"))

    def test_empty_file_falls_through(self, isolated):
        (isolated / "polyglotforge.yaml").write_text("")
        assert load_config() == PolyglotForgeConfig()

    def test_invalid_yaml(self, isolated):
        (isolated / "polyglotforge.yaml").write_text("llm: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config()

    def test_invalid_schema(self, isolated):
        (isolated / "polyglotforge.yaml").write_text("server:\n  port: -1\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_env_var_expansion(self, isolated, monkeypatch):
        monkeypatch.setenv("PF_MODEL", "my-model")
        (isolated / "polyglotforge.yaml").write_text("llm:\n  model: ${PF_MODEL}\n")
        assert load_config().llm.model == "my-model"

    def test_port_env_override(self, isolated, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert load_config().server.port == 8080

    @pytest.mark.parametrize("value", ["eighty", "0", "70000", "-1"])
    def test_bad_port_env(self, isolated, monkeypatch, value):
        monkeypatch.setenv("PORT", value)
        with pytest.raises(ValueError, match="Invalid PORT"):
            load_config()

    def test_dotenv_loaded(self, isolated, monkeypatch):
        monkeypatch.delenv("PF_FROM_DOTENV", raising=False)
        (isolated / ".env").write_text("PF_FROM_DOTENV=from-file\n")
        (isolated / "polyglotforge.yaml").write_text("llm:\n  model: ${PF_FROM_DOTENV}\n")
        assert load_config().llm.model == "from-file"

    def test_template_is_loadable(self, isolated):
        (isolated / "polyglotforge.yaml").write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config() == PolyglotForgeConfig()


class TestExpandEnvVars:
    def test_nested(self, monkeypatch):
        monkeypatch.setenv("A", "1")
        assert _expand_env_vars({"x": ["${A}", {"y": "${A}-${MISSING_VAR_XYZ}"}]}) == {
            "x": ["1", {"y": "1-"}]
        }

    def test_non_strings_untouched(self):
        assert _expand_env_vars(3) == 3
