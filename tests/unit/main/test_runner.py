from __future__ import annotations

from datetime import datetime, timezone

from dependency_injector import providers

from activity_readme.application.dtos.report_dto import ReportResultDTO
from activity_readme.domain.entities.errors import ActivityFeedError
from activity_readme.main import runner
from activity_readme.main.container import init_container


class _StubUseCase:
    def __init__(self, error: Exception | None = None):
        self._error = error

    async def execute(self) -> ReportResultDTO:
        if self._error is not None:
            raise self._error
        return ReportResultDTO(
            location="README.md",
            events=3,
            since=datetime(2021, 5, 1, tzinfo=timezone.utc),
            most_active_hour=9,
            most_active_group="repoA",
        )


def _patch_container(monkeypatch, use_case: _StubUseCase) -> None:
    def _init(settings):
        container = init_container(settings)
        container.generate_report_use_case.override(providers.Object(use_case))
        return container

    monkeypatch.setattr(runner, "init_container", _init)


def test_main_returns_zero_on_success(monkeypatch) -> None:
    _patch_container(monkeypatch, _StubUseCase())

    assert runner.main() == 0


def test_main_returns_one_when_a_stage_fails(monkeypatch) -> None:
    _patch_container(monkeypatch, _StubUseCase(ActivityFeedError("rate limited")))

    assert runner.main() == 1


def test_main_returns_one_on_invalid_settings(monkeypatch) -> None:
    monkeypatch.setenv("REPORT_HOUR_INTERVAL", "5")
    _patch_container(monkeypatch, _StubUseCase())

    assert runner.main() == 1
