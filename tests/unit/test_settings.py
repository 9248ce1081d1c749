"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
import structlog
import structlog.testing
from pydantic import ValidationError

from cogbridge.config.logging import configure_logging
from cogbridge.config.settings import (
    LoggingSettings,
    OpenCogSettings,
    Settings,
    load_yaml_config,
)


class TestOpenCogSettings:
    """Test suite for OpenCogSettings."""

    def test_defaults(self, opencog_config: OpenCogSettings):
        assert opencog_config.api_base is None
        assert opencog_config.api_key is None
        assert opencog_config.models == []
        assert opencog_config.patch is None

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OPENCOG_API_BASE", "http://cogserver.local:8080/api")
        monkeypatch.setenv("OPENCOG_API_KEY", "cog-key")
        cfg = OpenCogSettings()
        assert cfg.api_base == "http://cogserver.local:8080/api"
        assert cfg.api_key == "cog-key"

    def test_models_from_dict(self):
        cfg = OpenCogSettings(
            models=[{"name": "opencog-chat", "max_output_tokens": 256, "require_max_tokens": True}]
        )
        assert cfg.models[0].max_tokens_param() == 256


class TestLoggingSettings:
    """Test suite for LoggingSettings."""

    def test_level_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_bad_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")


class TestYamlConfig:
    """Test suite for YAML loading."""

    def test_first_existing_file_wins(self, tmp_path: Path):
        first = tmp_path / "first.yaml"
        second = tmp_path / "second.yaml"
        second.write_text("opencog:\n  api_base: http://second\n", encoding="utf-8")
        first.write_text("opencog:\n  api_base: http://first\n", encoding="utf-8")
        data = load_yaml_config([tmp_path / "missing.yaml", first, second])
        assert data == {"opencog": {"api_base": "http://first"}}

    def test_non_mapping_ignored(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert load_yaml_config([path]) == {}

    def test_invalid_yaml_skipped(self, tmp_path: Path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("opencog: [unclosed\n", encoding="utf-8")
        good = tmp_path / "good.yaml"
        good.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
        assert load_yaml_config([bad, good]) == {"logging": {"level": "WARNING"}}

    def test_yaml_feeds_settings(self, tmp_path: Path):
        path = tmp_path / "cogbridge.yaml"
        path.write_text(
            "opencog:\n"
            "  api_base: http://localhost:5001/v1\n"
            "  models:\n"
            "    - name: opencog-embed\n",
            encoding="utf-8",
        )
        settings = Settings(**load_yaml_config([path]))
        assert settings.opencog.api_base == "http://localhost:5001/v1"
        assert settings.opencog.models[0].name == "opencog-embed"


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_json_renderer(self):
        try:
            configure_logging(LoggingSettings(level="WARNING", json_format=True))
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        finally:
            structlog.reset_defaults()

    def test_console_renderer(self):
        try:
            configure_logging(LoggingSettings())
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        finally:
            structlog.reset_defaults()

    def test_level_filters_events(self):
        try:
            configure_logging(LoggingSettings(level="warning"))
            with structlog.testing.capture_logs() as logs:
                log = structlog.get_logger("cogbridge.test")
                log.debug("dropped")
                log.info("dropped too")
                log.warning("kept")
            assert [entry["event"] for entry in logs] == ["kept"]
        finally:
            structlog.reset_defaults()
