"""
Application Settings - Main Layer

Pydantic Settings read from environment variables, a ``.env`` file and
defaults. ``*_FILE`` variables (Docker secrets) are resolved first, so
``GITHUB_TOKEN_FILE`` can stand in for ``GITHUB_TOKEN``.
"""

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from activity_readme.application.models.report_options import (
    DEFAULT_FETCH_LIMIT,
    DEFAULT_USERNAME,
)
from activity_readme.domain.entities.activity import HOURS_PER_DAY
from activity_readme.domain.services.hour_plot_renderer import (
    DEFAULT_HEIGHT,
    DEFAULT_INTERVAL,
    DEFAULT_WIDTH,
)
from activity_readme.domain.services.stats_aggregator import DEFAULT_SAMPLE_SIZE
from activity_readme.infrastructure.services.zoneinfo_projector import (
    DEFAULT_TIMEZONE,
)
from activity_readme.shared import EnumEnvironment, EnumLogLevel
from activity_readme.shared.env import load_secret_file_variables


class GitHubSettings(BaseSettings):
    """GitHub activity feed settings."""

    username: str = Field(
        default=DEFAULT_USERNAME, description="Account whose events are charted"
    )
    token: Optional[str] = Field(
        default=None, description="Personal access token used for the API"
    )
    require_token: bool = Field(
        default=True, description="Fail instead of calling the API anonymously"
    )
    api_url: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )
    fetch_limit: int = Field(
        default=DEFAULT_FETCH_LIMIT,
        ge=1,
        le=100,
        description="Number of events requested",
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_", case_sensitive=False, extra="ignore"
    )


class ReportSettings(BaseSettings):
    """Layout of the rendered report."""

    timezone: str = Field(
        default=DEFAULT_TIMEZONE, description="IANA zone used for local hours"
    )
    plot_width: int = Field(
        default=DEFAULT_WIDTH, ge=12, description="Hour plot width in columns"
    )
    plot_height: int = Field(
        default=DEFAULT_HEIGHT, ge=1, description="Hour plot height in rows"
    )
    hour_interval: int = Field(
        default=DEFAULT_INTERVAL, gt=0, description="Hours between ruler ticks"
    )
    sample_size: int = Field(
        default=DEFAULT_SAMPLE_SIZE, ge=0, description="Breadcrumbs listed"
    )
    attribution: str = Field(
        default="**[robshakir](mailto:robjs@google.com) is not an official "
        "Google product.**",
        description="Static line placed after the charts",
    )

    @model_validator(mode="after")
    def _check_hour_axis(self) -> "ReportSettings":
        if HOURS_PER_DAY % self.hour_interval:
            raise ValueError(
                f"hour_interval must divide {HOURS_PER_DAY}, got {self.hour_interval}"
            )
        ticks = HOURS_PER_DAY // self.hour_interval
        if self.plot_width < ticks:
            raise ValueError(
                f"plot_width must be at least {ticks} for a {self.hour_interval}h "
                f"interval, got {self.plot_width}"
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="REPORT_", case_sensitive=False, extra="ignore"
    )


class OutputSettings(BaseSettings):
    """Where the document is written."""

    path: str = Field(default="README.md", description="Output file path")

    model_config = SettingsConfigDict(
        env_prefix="OUTPUT_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to stderr only)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    github: GitHubSettings = Field(default_factory=GitHubSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Build the application settings.

    Kept as a factory so tests can patch it.
    """
    load_secret_file_variables()
    return AppSettings()
