"""
Domain Service - Group Bar Chart

Renders per-group event counts as thick, inline-labelled ASCII bars followed
by the "most active group" sentence.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Mapping, Tuple

from activity_readme.domain.entities.errors import EmptyInputError
from activity_readme.domain.services.formatting import format_local_time

BAR_GLYPH = "#"
# counts above this are halved so the longest bar stays bounded
SCALE_THRESHOLD = 100
GUTTER_MARGIN = 5
NAME_MARGIN = 4


def most_active_group(counts: Mapping[str, int]) -> Tuple[str, int]:
    """Return ``(group, count)`` of the busiest group, first one wins on ties.

    Raises:
        EmptyInputError: If ``counts`` is empty.
    """

    if not counts:
        raise EmptyInputError(
            "Cannot chart an empty group mapping", stage="render_group_bars"
        )

    entries = iter(counts.items())
    active_group, max_count = next(entries)
    for group, count in entries:
        if count > max_count:
            active_group, max_count = group, count
    return active_group, max_count


def scale_divisor(max_count: int) -> int:
    return 1 if max_count <= SCALE_THRESHOLD else 2


def bar_length(count: int, divisor: int) -> int:
    return count // divisor


def render_group_bars(
    counts: Mapping[str, int],
    start: datetime,
    bar_glyph: str = BAR_GLYPH,
) -> str:
    """Render one three-line bar per group, in the mapping's iteration order.

    The middle line of each bar carries the group name, the outer two are
    indented by the same gutter so the label sits inside a thick bar.

    Raises:
        EmptyInputError: If ``counts`` is empty.
    """

    active_group, max_count = most_active_group(counts)
    max_name_len = max(len(name) for name in counts)
    divisor = scale_divisor(max_count)
    gutter = " " * (max_name_len + GUTTER_MARGIN)

    lines: List[str] = []
    for name, count in counts.items():
        bar = bar_glyph * bar_length(count, divisor)
        padding = " " * ((max_name_len - len(name)) + NAME_MARGIN)
        lines += [gutter + bar, f" {name}{padding}{bar}", gutter + bar, ""]

    lines += [
        "",
        "",
        f"Since {format_local_time(start)}, I've been most active in "
        f"{active_group}, with {max_count} events.",
    ]
    return "\n".join(lines) + "\n"
