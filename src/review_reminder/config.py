"""
Configuration Management

Configuration of a reminder run, loaded from GitHub Action inputs,
environment variables or a YAML file, and passed explicitly to the pipeline.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler

from .errors import ConfigError, UnsupportedProviderError
from .models.reminder import Provider


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    repository: str = ""
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class ReminderConfig:
    """Reminder destination and selection settings"""
    webhook_url: str = ""
    channel: str = ""
    provider: str = Provider.SLACK.value
    identity_map_raw: str = ""
    waiting_time_days: int = 0
    ignore_label: str = ""
    timeout_seconds: int = 30


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


def _action_input(environ: Mapping[str, str], name: str, default: str = "") -> str:
    """Read a GitHub Action input; the runner exposes it as INPUT_<NAME>."""
    key = f"INPUT_{name.upper()}"
    for candidate in (key, key.replace("-", "_")):
        if candidate in environ:
            return environ[candidate].strip()
    return default


def _to_int(value: Any, name: str) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    reminder: ReminderConfig = field(default_factory=ReminderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """GitHub Action 입력과 환경 변수에서 설정 로드"""
        env = os.environ if environ is None else environ
        return cls(
            github=GitHubConfig(
                token=env.get("GITHUB_TOKEN") or _action_input(env, "github-token") or None,
                repository=env.get("GITHUB_REPOSITORY", ""),
                api_base_url=env.get("GITHUB_API_URL") or "https://api.github.com",
                timeout_seconds=_to_int(env.get("GITHUB_TIMEOUT", "30"), "GITHUB_TIMEOUT"),
            ),
            reminder=ReminderConfig(
                webhook_url=_action_input(env, "webhook-url"),
                channel=_action_input(env, "channel"),
                provider=_action_input(env, "provider", Provider.SLACK.value),
                identity_map_raw=_action_input(env, "github-provider-map"),
                waiting_time_days=_to_int(_action_input(env, "waiting-time"), "waiting-time"),
                ignore_label=_action_input(env, "ignore-label"),
                timeout_seconds=_to_int(env.get("WEBHOOK_TIMEOUT", "30"), "WEBHOOK_TIMEOUT"),
            ),
            logging=LoggingConfig(
                level=env.get("LOG_LEVEL", "INFO"),
                format=env.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
                file_path=env.get("LOG_FILE"),
                max_file_size=_to_int(env.get("LOG_MAX_SIZE", str(10 * 1024 * 1024)), "LOG_MAX_SIZE"),
                backup_count=_to_int(env.get("LOG_BACKUP_COUNT", "5"), "LOG_BACKUP_COUNT"),
            ),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        try:
            reminder = ReminderConfig(**config_data.get('reminder', {}))
            config = cls(
                github=GitHubConfig(**config_data.get('github', {})),
                reminder=reminder,
                logging=LoggingConfig(**config_data.get('logging', {})),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

        reminder.waiting_time_days = _to_int(reminder.waiting_time_days, "waiting_time_days")
        return config

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        if not self.reminder.webhook_url:
            errors.append("webhook-url is required")

        if '/' not in self.github.repository:
            errors.append("Repository must be in format 'owner/repo'")

        try:
            Provider.parse(self.reminder.provider)
        except UnsupportedProviderError as e:
            errors.append(str(e))

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'repository': self.github.repository,
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'reminder': {
                'webhook_url': '***' if self.reminder.webhook_url else '',
                'channel': self.reminder.channel,
                'provider': self.reminder.provider,
                'identity_map_raw': self.reminder.identity_map_raw,
                'waiting_time_days': self.reminder.waiting_time_days,
                'ignore_label': self.reminder.ignore_label,
                'timeout_seconds': self.reminder.timeout_seconds,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
        }


def setup_logging(config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))
        logging.getLogger().addHandler(handler)
