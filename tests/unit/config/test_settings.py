"""Unit tests for config settings & validation."""

from pathlib import Path

import pytest

from mf_messaging.config import (
    BrokerSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
)

_BROKER_KEYS = (
    "MF_BROKER_ALLOWED_ORIGINS",
    "MF_BROKER_EVENT_NAME",
    "MF_BROKER_LOG_LEVEL",
    "MF_BROKER_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _BROKER_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# EnvSettingsLoader -> BrokerSettings
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        settings = EnvSettingsLoader().load(BrokerSettings)
        assert settings.allowed_origins == []
        assert settings.event_name == "message"
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_allowed_origins_are_comma_separated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_ALLOWED_ORIGINS", "https://a.test, https://b.test,,")
        settings = EnvSettingsLoader().load(BrokerSettings)
        assert settings.allowed_origins == ["https://a.test", "https://b.test"]

    def test_event_name_passed_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_EVENT_NAME", "mf-message")
        assert EnvSettingsLoader().load(BrokerSettings).event_name == "mf-message"

    @pytest.mark.parametrize("raw", ["true", "True", "1", "yes", "on"])
    def test_log_json_truthy(self, raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_LOG_JSON", raw)
        assert EnvSettingsLoader().load(BrokerSettings).log_json is True

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off"])
    def test_log_json_falsy(self, raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_LOG_JSON", raw)
        assert EnvSettingsLoader().load(BrokerSettings).log_json is False

    def test_log_json_garbage_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_LOG_JSON", "maybe")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(BrokerSettings)
        assert exc_info.value.setting_name == "MF_BROKER_LOG_JSON"
        assert exc_info.value.value == "maybe"
        assert exc_info.value.detail["setting"] == "MF_BROKER_LOG_JSON"


# ---------------------------------------------------------------------------
# BrokerSettings validation
# ---------------------------------------------------------------------------


class TestBrokerSettings:
    def test_log_level_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_LOG_LEVEL", "debug")
        assert EnvSettingsLoader().load(BrokerSettings).log_level == "DEBUG"

    def test_invalid_log_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MF_BROKER_LOG_LEVEL", "chatty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(BrokerSettings)
        assert exc_info.value.setting_name == "log_level"
        assert isinstance(exc_info.value, ConfigError)

    def test_empty_event_name_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            BrokerSettings(event_name="")


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            "MF_BROKER_ALLOWED_ORIGINS=https://shell.test\n"
            "MF_BROKER_EVENT_NAME=mf\n"
            "MF_BROKER_LOG_JSON=off\n"
        )
        settings = DotenvSettingsLoader(str(env_file)).load(BrokerSettings)
        assert settings.allowed_origins == ["https://shell.test"]
        assert settings.event_name == "mf"
        assert settings.log_json is False

    def test_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("MF_BROKER_EVENT_NAME=from-file\n")
        monkeypatch.setenv("MF_BROKER_EVENT_NAME", "from-env")
        settings = DotenvSettingsLoader(str(env_file)).load(BrokerSettings)
        assert settings.event_name == "from-env"
