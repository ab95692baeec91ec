"""
Unit tests for configuration loading and validation.
"""

import logging
import logging.handlers
import pytest
import yaml

from review_reminder.config import AppConfig, GitHubConfig, LoggingConfig, ReminderConfig, setup_logging
from review_reminder.errors import ConfigError


ACTION_ENV = {
    "GITHUB_TOKEN": "ghs_token",
    "GITHUB_REPOSITORY": "octo/app",
    "GITHUB_API_URL": "https://github.example.com/api/v3",
    "INPUT_WEBHOOK-URL": "https://hooks.slack.com/services/T/B/X",
    "INPUT_CHANNEL": "#reviews",
    "INPUT_GITHUB-PROVIDER-MAP": "alice:U1,bob:U2",
    "INPUT_WAITING-TIME": "5",
    "INPUT_IGNORE-LABEL": "wip",
}


def valid_config(**reminder_overrides) -> AppConfig:
    reminder = dict(webhook_url="https://hooks.example.com/x", channel="#c")
    reminder.update(reminder_overrides)
    return AppConfig(
        github=GitHubConfig(token="t", repository="octo/app"),
        reminder=ReminderConfig(**reminder),
    )


class TestFromEnv:
    """Unit tests for AppConfig.from_env."""

    def test_action_inputs(self):
        config = AppConfig.from_env(ACTION_ENV)

        assert config.github.token == "ghs_token"
        assert config.github.repository == "octo/app"
        assert config.github.api_base_url == "https://github.example.com/api/v3"
        assert config.reminder.webhook_url == "https://hooks.slack.com/services/T/B/X"
        assert config.reminder.channel == "#reviews"
        assert config.reminder.identity_map_raw == "alice:U1,bob:U2"
        assert config.reminder.waiting_time_days == 5
        assert config.reminder.ignore_label == "wip"
        assert config.reminder.provider == "slack"

    def test_underscore_input_names(self):
        config = AppConfig.from_env({"INPUT_WEBHOOK_URL": "https://x", "INPUT_PROVIDER": "msteams"})

        assert config.reminder.webhook_url == "https://x"
        assert config.reminder.provider == "msteams"

    def test_defaults(self):
        config = AppConfig.from_env({})

        assert config.github.token is None
        assert config.github.api_base_url == "https://api.github.com"
        assert config.reminder.waiting_time_days == 0
        assert config.reminder.ignore_label == ""
        assert config.logging.level == "INFO"

    def test_timeouts(self):
        """Test the GitHub and webhook timeouts are read separately."""
        config = AppConfig.from_env({"GITHUB_TIMEOUT": "10", "WEBHOOK_TIMEOUT": "4"})

        assert config.github.timeout_seconds == 10
        assert config.reminder.timeout_seconds == 4

    def test_invalid_waiting_time(self):
        with pytest.raises(ConfigError):
            AppConfig.from_env({"INPUT_WAITING-TIME": "five"})


class TestFromYaml:
    """Unit tests for AppConfig.from_yaml."""

    def test_load(self, tmp_path):
        path = tmp_path / "reminder.yaml"
        path.write_text(yaml.safe_dump({
            "github": {"token": "t", "repository": "octo/app"},
            "reminder": {
                "webhook_url": "https://outlook.office.com/webhook/x",
                "provider": "msteams",
                "waiting_time_days": "3",
            },
            "logging": {"level": "DEBUG"},
        }), encoding="utf-8")

        config = AppConfig.from_yaml(str(path))

        assert config.github.repository == "octo/app"
        assert config.reminder.provider == "msteams"
        assert config.reminder.waiting_time_days == 3
        assert config.logging.level == "DEBUG"
        config.validate()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            AppConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "reminder.yaml"
        path.write_text("reminder:\n  webhook: https://x\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            AppConfig.from_yaml(str(path))


class TestValidate:
    """Unit tests for AppConfig.validate."""

    def test_valid(self):
        valid_config().validate()

    def test_collects_all_errors(self):
        config = AppConfig(reminder=ReminderConfig(provider="discord"), logging=LoggingConfig(level="LOUD"))

        with pytest.raises(ConfigError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "webhook-url is required" in message
        assert "owner/repo" in message
        assert "discord" in message
        assert "LOUD" in message

    def test_to_dict_redacts_secrets(self):
        data = valid_config().to_dict()

        assert "token" not in data["github"]
        assert data["reminder"]["webhook_url"] == "***"


class TestSetupLogging:
    def test_rotating_file_handler(self, tmp_path):
        log_file = tmp_path / "reminder.log"
        root = logging.getLogger()
        before = list(root.handlers)

        try:
            setup_logging(LoggingConfig(file_path=str(log_file)))
            added = [h for h in root.handlers if h not in before]
            assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in added)
        finally:
            for handler in list(root.handlers):
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
