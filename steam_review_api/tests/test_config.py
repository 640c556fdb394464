"""Test suite for settings and logging setup."""

import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from steam_review_api.config import Settings, get_settings
from steam_review_api.observ import build_processors, configure_logging


PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_python(code: str, **env) -> subprocess.CompletedProcess:
    """Run code in a fresh interpreter so import-time effects are visible."""
    clean_env = {
        key: value for key, value in os.environ.items()
        if not key.upper().startswith("STEAM_REVIEW_")
    }
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(code)],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
        env={**clean_env, **env},
    )


class TestSettings:
    """Test environment-driven settings."""

    def setup_method(self):
        get_settings.cache_clear()

    def teardown_method(self):
        get_settings.cache_clear()

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STEAM_REVIEW_DEBUG", raising=False)
        monkeypatch.delenv("STEAM_REVIEW_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("STEAM_REVIEW_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("STEAM_REVIEW_DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.debug is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.delenv("STEAM_REVIEW_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_env_names_case_insensitive(self, monkeypatch):
        monkeypatch.delenv("STEAM_REVIEW_LOG_LEVEL", raising=False)
        monkeypatch.setenv("steam_review_log_level", "ERROR")
        assert Settings(_env_file=None).log_level == "ERROR"

    def test_log_level_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_get_settings_cached(self, monkeypatch):
        monkeypatch.setenv("STEAM_REVIEW_LOG_LEVEL", "ERROR")
        first = get_settings()
        monkeypatch.setenv("STEAM_REVIEW_LOG_LEVEL", "CRITICAL")
        assert get_settings() is first
        assert get_settings().log_level == "ERROR"


class TestProcessors:
    """Test renderer selection."""

    def test_json_by_default(self):
        processors = build_processors(Settings(_env_file=None, debug=False, log_level="INFO"))
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_when_debug(self):
        processors = build_processors(Settings(_env_file=None, debug=True, log_level="INFO"))
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_console_at_debug_level(self):
        processors = build_processors(Settings(_env_file=None, log_level="DEBUG"))
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestConfigureLogging:
    """Test the explicit application setup."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_applies_renderer(self):
        configure_logging(Settings(_env_file=None, debug=False, log_level="WARNING"))
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger


class TestImportSideEffects:
    """Importing the package must leave host logging alone."""

    def test_existing_structlog_config_survives_import(self):
        result = run_python("""
            import logging
            import structlog

            structlog.configure(processors=[structlog.processors.KeyValueRenderer()])
            before = structlog.get_config()["processors"]
            handlers = list(logging.getLogger().handlers)

            import steam_review_api

            assert structlog.get_config()["processors"] == before
            assert logging.getLogger().handlers == handlers
            print("ok")
        """)
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "ok"

    def test_bad_log_level_does_not_break_import(self):
        result = run_python("""
            from steam_review_api import Language
            print(Language.parse("english"))
        """, STEAM_REVIEW_LOG_LEVEL="verbose")
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "english"

    def test_bad_log_level_fails_on_configure(self):
        result = run_python("""
            import pydantic
            from steam_review_api.observ import configure_logging

            try:
                configure_logging()
            except pydantic.ValidationError:
                print("rejected")
        """, STEAM_REVIEW_LOG_LEVEL="verbose")
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "rejected"
