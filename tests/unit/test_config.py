"""Tests for environment-driven settings."""

import pytest

from toolrunner.config.settings import load_settings


class TestLoadSettings:

    def test_defaults(self, monkeypatch):
        for name in (
            "TOOLRUNNER_MAX_CONCURRENT_TOOL_CALLS",
            "TOOLRUNNER_SELECTION_MODEL",
            "TOOLRUNNER_CONTEXT_DIR",
            "OPENAI_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings(dotenv=False)

        assert settings.max_concurrent_tool_calls == 3
        assert settings.selection_model == "gpt-5-mini"
        assert settings.context_dir == ".toolrunner/context"
        assert settings.openai_timeout == 60.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TOOLRUNNER_MAX_CONCURRENT_TOOL_CALLS", "6")
        monkeypatch.setenv("TOOLRUNNER_SELECTION_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("TOOLRUNNER_CONTEXT_DIR", "/tmp/ctx")
        monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
        monkeypatch.setenv("OPENAI_TIMEOUT", "15")

        settings = load_settings(dotenv=False)

        assert settings.max_concurrent_tool_calls == 6
        assert settings.selection_model == "gpt-4o-mini"
        assert settings.context_dir == "/tmp/ctx"
        assert settings.openai_api_key == "test-openai-key"
        assert settings.openai_timeout == 15.0
        assert "test-openai-key" not in repr(settings)

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("TOOLRUNNER_MAX_CONCURRENT_TOOL_CALLS", "three")
        with pytest.raises(ValueError, match="must be an integer"):
            load_settings(dotenv=False)
