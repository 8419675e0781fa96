# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, NOTIFICATION__CONTEXT_LABEL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "github-notification-context"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/notification_context.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class NotificationSettings(BaseSettings):
    """Commit-status context and message configuration (from env NOTIFICATION__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    context_label: str = Field(
        default="",
        description="Context label template; may contain $NAME / ${NAME} macro tokens.",
    )
    type_suffix: bool = Field(
        default=False,
        description="Append /branch, /pr-head or /pr-merge to every context.",
    )
    multiple_statuses: bool = Field(
        default=False,
        description="Split context_label on multiple_status_delimiter into several contexts.",
    )
    multiple_status_delimiter: str = Field(
        default="",
        description="Delimiter used when multiple_statuses is enabled.",
    )

    report_success: bool = True
    report_unstable: bool = True
    report_failure: bool = True
    report_not_built: bool = True
    report_aborted: bool = True

    # Blank means "use the built-in text for that result".
    message_good: str = ""
    message_unstable: str = ""
    message_failure: str = ""
    message_aborted: str = ""
    message_other: str = ""
    message_pending: str = ""
    message_queued: str = ""

    per_result_messages: bool = Field(
        default=True,
        description="If False, every result uses the host's single default message.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, NOTIFICATION__TYPE_SUFFIX.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(notification={"context_label": "ci", "type_suffix": True})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from github_notification_context.config import get_settings

        settings = get_settings()
        label = settings.notification.context_label
    """
    return Settings()
