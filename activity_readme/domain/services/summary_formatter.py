"""
Domain Service - Summary Formatter

Assembles the final Markdown document from the aggregate statistics: the
breadcrumb list, the hour plot and the group bars (each in a fenced code
block), the attribution and the last-updated line.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from activity_readme.domain.entities.activity import AggregateStats
from activity_readme.domain.ports.time_zone_projector import ITimeZoneProjector
from activity_readme.domain.services.breadcrumb_formatter import (
    DEFAULT_CATEGORY_PHRASES,
    format_breadcrumbs,
)
from activity_readme.domain.services.formatting import format_local_time
from activity_readme.domain.services.group_bar_renderer import render_group_bars
from activity_readme.domain.services.hour_plot_renderer import (
    DEFAULT_HEIGHT,
    DEFAULT_INTERVAL,
    DEFAULT_WIDTH,
    render_hour_plot,
)

FENCE = "```"
RECENT_ACTIVITY_HEADER = "### 🕘 Recent Activity"


def fenced(block: str) -> str:
    """Wrap ``block`` in a Markdown code fence."""
    return f"\n{FENCE}\n{block}\n{FENCE}\n"


class SummaryFormatter:
    """Composes the report document from one run's statistics."""

    def __init__(
        self,
        projector: ITimeZoneProjector,
        attribution: str = "",
        phrases: Mapping[str, str] = DEFAULT_CATEGORY_PHRASES,
        plot_width: int = DEFAULT_WIDTH,
        plot_height: int = DEFAULT_HEIGHT,
        hour_interval: int = DEFAULT_INTERVAL,
    ) -> None:
        self._projector = projector
        self._attribution = attribution
        self._phrases = phrases
        self._plot_width = plot_width
        self._plot_height = plot_height
        self._hour_interval = hour_interval

    def format(self, stats: AggregateStats, updated_at: datetime) -> str:
        """Render the whole document.

        Args:
            stats: Aggregated activity of this run.
            updated_at: Local time stamped on the last line.
        """

        hours = render_hour_plot(
            stats.hour_histogram,
            stats.start,
            width=self._plot_width,
            height=self._plot_height,
            interval=self._hour_interval,
        )
        groups = render_group_bars(stats.group_counts, stats.start)
        breadcrumbs = format_breadcrumbs(stats.sample, self._phrases, self._projector)

        parts = [
            breadcrumbs,
            "\n" + RECENT_ACTIVITY_HEADER,
            fenced(hours),
            "\n\n",
            fenced(groups),
        ]
        if self._attribution:
            parts.append(self._attribution + "  \n")
        parts.append(f"\n\nLast Updated: {format_local_time(updated_at)}\n")
        return "".join(parts)
