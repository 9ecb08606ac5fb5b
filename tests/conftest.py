from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

from activity_readme.domain.entities.activity import ActivityRecord

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def utc_projector(instant: datetime) -> datetime:
    return instant.astimezone(timezone.utc)


def make_records(
    hours: Sequence[int],
    groups: Sequence[str],
    categories: Sequence[str] | None = None,
    day: datetime = datetime(2021, 5, 1, tzinfo=timezone.utc),
) -> List[ActivityRecord]:
    """Records at the given UTC hours, ordered most-recent-first."""

    categories = categories or ["PushEvent"] * len(hours)
    records = [
        ActivityRecord(
            timestamp=day - timedelta(days=index) + timedelta(hours=hour),
            category=category,
            group=group,
        )
        for index, (hour, group, category) in enumerate(zip(hours, groups, categories))
    ]
    return records


@pytest.fixture()
def projector() -> Callable[[datetime], datetime]:
    return utc_projector


@pytest.fixture()
def scenario_records() -> List[ActivityRecord]:
    return make_records([9, 9, 14], ["repoA", "repoA", "repoB"])


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2021, 5, 2, 12, 0, tzinfo=timezone.utc)
