"""Tests for environment-driven settings."""

import pytest

from app.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.anthropic_api_key == ""
        assert settings.enable_interpreter is True
        assert settings.interpret_daily_limit == 3
        assert settings.interpreter_configured is False
        assert (settings.emoji_data_dir / "skull.json").is_file()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        monkeypatch.setenv("INTERPRETER_TIMEOUT_SECONDS", "12.5")

        settings = Settings(_env_file=None)

        assert settings.anthropic_api_key == "sk-ant-test"
        assert settings.interpreter_timeout_seconds == 12.5
        assert settings.interpreter_configured is True

    def test_disabled_interpreter_not_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        monkeypatch.setenv("ENABLE_INTERPRETER", "false")

        settings = Settings(_env_file=None)

        assert settings.interpreter_configured is False
