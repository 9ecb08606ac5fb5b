"""Fold activity records into fixed-shape statistics."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Sequence

from activity_readme.domain.entities.activity import (
    HOURS_PER_DAY,
    ActivityRecord,
    AggregateStats,
)
from activity_readme.domain.entities.errors import EmptyInputError
from activity_readme.domain.ports.time_zone_projector import ITimeZoneProjector

DEFAULT_SAMPLE_SIZE = 10


def aggregate(
    records: Sequence[ActivityRecord],
    projector: ITimeZoneProjector,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> AggregateStats:
    """Build the hour histogram, per-group counts and sample of ``records``.

    ``records`` is expected most-recent-first, as the activity feed returns
    it, so the last element is taken as the oldest one and its local time
    becomes ``start``.

    Raises:
        EmptyInputError: If ``records`` is empty.
        ProjectionError: If ``projector`` cannot resolve its time zone.
    """

    if not records:
        raise EmptyInputError(
            "Cannot aggregate an empty activity sequence", stage="aggregate"
        )

    hours: List[int] = [0] * HOURS_PER_DAY
    groups: Dict[str, int] = {}
    categories: Dict[str, int] = {}

    for record in records:
        hours[projector(record.timestamp).hour] += 1
        groups[record.group] = groups.get(record.group, 0) + 1
        categories[record.category] = categories.get(record.category, 0) + 1

    return AggregateStats(
        start=projector(records[-1].timestamp),
        hour_histogram=tuple(hours),
        group_counts=MappingProxyType(groups),
        category_counts=MappingProxyType(categories),
        sample=tuple(records[:sample_size]),
    )
