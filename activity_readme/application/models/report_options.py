"""Configuration value passed into the report pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from activity_readme.domain.services.hour_plot_renderer import (
    DEFAULT_HEIGHT,
    DEFAULT_INTERVAL,
    DEFAULT_WIDTH,
)
from activity_readme.domain.services.stats_aggregator import DEFAULT_SAMPLE_SIZE

DEFAULT_USERNAME = "robshakir"
DEFAULT_FETCH_LIMIT = 100


@dataclass(frozen=True)
class ReportOptions:
    """
    Settings consumed by the report use case.

    Attributes:
        username: GitHub account whose public events are charted.
        fetch_limit: Number of events requested (the API caps it at 100).
        plot_width: Columns of the hour plot and its ruler.
        plot_height: Rows of the hour plot.
        hour_interval: Hours between ruler ticks, must divide 24.
        sample_size: Number of most recent events listed as breadcrumbs.
        attribution: Static line placed after the charts, omitted when empty.
    """

    username: str = DEFAULT_USERNAME
    fetch_limit: int = DEFAULT_FETCH_LIMIT
    plot_width: int = DEFAULT_WIDTH
    plot_height: int = DEFAULT_HEIGHT
    hour_interval: int = DEFAULT_INTERVAL
    sample_size: int = DEFAULT_SAMPLE_SIZE
    attribution: str = ""
