from __future__ import annotations

import pytest
from pydantic import ValidationError

from activity_readme.main.config import AppSettings, get_settings
from activity_readme.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    for key in ("GITHUB_USERNAME", "GITHUB_TOKEN", "REPORT_TIMEZONE", "OUTPUT_PATH"):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.github.username == "robshakir"
    assert settings.github.fetch_limit == 100
    assert settings.report.timezone == "America/Los_Angeles"
    assert (settings.report.plot_width, settings.report.plot_height) == (100, 15)
    assert settings.output.path == "README.md"


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("GITHUB_FETCH_LIMIT", "50")
    monkeypatch.setenv("REPORT_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("REPORT_HOUR_INTERVAL", "4")
    monkeypatch.setenv("OUTPUT_PATH", "/tmp/profile.md")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.github.username == "octocat"
    assert settings.github.fetch_limit == 50
    assert settings.report.timezone == "Europe/Berlin"
    assert settings.report.hour_interval == 4
    assert settings.output.path == "/tmp/profile.md"
    assert settings.logging.level.value == "DEBUG"


def test_token_can_come_from_a_secret_file(tmp_path, monkeypatch) -> None:
    secret = tmp_path / "github_token"
    secret.write_text("ghp_secret\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))

    settings = get_settings()

    assert settings.github.token == "ghp_secret"


def test_fetch_limit_is_capped(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_FETCH_LIMIT", "500")

    with pytest.raises(ValidationError):
        AppSettings()


@pytest.mark.parametrize("interval", ["5", "7", "0"])
def test_hour_interval_must_divide_the_day(monkeypatch, interval) -> None:
    monkeypatch.setenv("REPORT_HOUR_INTERVAL", interval)

    with pytest.raises(ValidationError):
        get_settings()


def test_plot_width_must_fit_one_column_per_tick(monkeypatch) -> None:
    monkeypatch.setenv("REPORT_HOUR_INTERVAL", "1")
    monkeypatch.setenv("REPORT_PLOT_WIDTH", "20")

    with pytest.raises(ValidationError):
        AppSettings()

    monkeypatch.setenv("REPORT_PLOT_WIDTH", "24")
    assert AppSettings().report.hour_interval == 1
