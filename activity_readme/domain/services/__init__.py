"""Domain services: aggregation, rendering and report composition."""

from .breadcrumb_formatter import DEFAULT_CATEGORY_PHRASES, format_breadcrumbs
from .group_bar_renderer import most_active_group, render_group_bars
from .hour_plot_renderer import most_active_hour, render_hour_plot
from .stats_aggregator import aggregate
from .summary_formatter import SummaryFormatter

__all__ = [
    "DEFAULT_CATEGORY_PHRASES",
    "SummaryFormatter",
    "aggregate",
    "format_breadcrumbs",
    "most_active_group",
    "most_active_hour",
    "render_group_bars",
    "render_hour_plot",
]
