"""Domain entities for activity records and their aggregate statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Tuple

HOURS_PER_DAY = 24


@dataclass(frozen=True, slots=True)
class ActivityRecord:
    """A single timestamped event from the activity feed."""

    timestamp: datetime
    category: str
    group: str


@dataclass(frozen=True, slots=True)
class AggregateStats:
    """
    Fixed-shape statistics folded from one run's activity records.

    ``group_counts`` and ``category_counts`` iterate in order of first
    appearance in the input sequence.
    """

    start: datetime
    hour_histogram: Tuple[int, ...]
    group_counts: Mapping[str, int]
    category_counts: Mapping[str, int]
    sample: Tuple[ActivityRecord, ...]

    @property
    def total(self) -> int:
        return sum(self.hour_histogram)
