"""
Domain Service - Hour of Day Plot

Renders the 24-bucket hour histogram as a Braille line plot (drawn with
plotille's canvas), followed by an hour ruler, its tick labels and the
"most active hour" sentence.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Sequence, Tuple

import plotille

from activity_readme.domain.entities.activity import HOURS_PER_DAY
from activity_readme.domain.services.formatting import format_local_time

DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 15
DEFAULT_INTERVAL = 2

LABEL_WIDTH = len("HH:00")
TICK_GLYPH = "+"
RULE_GLYPH = "─"
AXIS_GLYPH = "┤"
CAPTION = "Events by Hour of Day"


def most_active_hour(hist: Sequence[float]) -> Tuple[int, float]:
    """Return ``(hour, count)`` of the busiest bucket, earliest hour on ties."""

    max_hour = 0
    max_count = hist[0] if hist else 0
    for hour, count in enumerate(hist):
        if count > max_count:
            max_count = count
            max_hour = hour
    return max_hour, max_count


def _y_limits(hist: Sequence[float]) -> Tuple[float, float]:
    top = max(hist)
    # plotille cannot scale a zero-height range
    return 0, top if top > 0 else 1


def x_limit(width: int, interval: int) -> float:
    """Canvas x range that puts hour ``h`` at ruler column ``h * step / interval``.

    The ruler spreads 24 hours over ``ticks * step`` columns, which can be
    narrower than ``width`` when the width is not a multiple of the tick count.
    """

    ticks = HOURS_PER_DAY // interval
    step = width // ticks
    return HOURS_PER_DAY * width / (ticks * step)


def _plot_rows(
    hist: Sequence[float], width: int, height: int, interval: int
) -> Tuple[List[str], int]:
    """Plot rows prefixed with y-axis labels, and the prefix width."""

    ymin, ymax = _y_limits(hist)
    canvas = plotille.Canvas(
        width, height, xmin=0, ymin=ymin, xmax=x_limit(width, interval), ymax=ymax
    )
    for hour in range(len(hist) - 1):
        canvas.line(hour, hist[hour], hour + 1, hist[hour + 1])

    rows = canvas.plot(linesep="\n").split("\n")

    labels = []
    for row in range(height):
        fraction = (height - 1 - row) / (height - 1) if height > 1 else 1
        labels.append(str(int(round(ymin + (ymax - ymin) * fraction))))
    label_width = max(len(label) for label in labels)

    plotted = [
        f"{label:>{label_width}} {AXIS_GLYPH}{row}" for label, row in zip(labels, rows)
    ]
    return plotted, label_width + 2


def hour_ruler(width: int, interval: int) -> str:
    """Horizontal rule of ``width`` columns with a tick every ``interval`` hours."""

    ticks = HOURS_PER_DAY // interval
    step = width // ticks
    return "".join(
        TICK_GLYPH if column % step == 0 and column // step < ticks else RULE_GLYPH
        for column in range(width)
    )


def hour_labels(width: int, interval: int) -> str:
    """``HH:00`` labels for every tick plus the closing ``24:00`` (as ``00:00``)."""

    ticks = HOURS_PER_DAY // interval
    spaces = (width - LABEL_WIDTH * ticks) // ticks
    return "".join(
        f"{(tick * interval) % HOURS_PER_DAY:02d}:00" + " " * spaces
        for tick in range(ticks + 1)
    )


def render_hour_plot(
    hist: Sequence[float],
    start: datetime,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    interval: int = DEFAULT_INTERVAL,
) -> str:
    """Render the hour-of-day plot block.

    Args:
        hist: 24 event counts, index 0 being local hour 00.
        start: Local time of the oldest event, quoted in the sentence.
        width: Plot and ruler width in columns.
        height: Plot height in rows.
        interval: Hours between ruler ticks, must divide 24.

    Returns:
        The plot, ruler, labels, caption and sentence as one text block.
    """

    if len(hist) != HOURS_PER_DAY:
        raise ValueError(f"Expected {HOURS_PER_DAY} hourly buckets, got {len(hist)}")
    if interval <= 0 or HOURS_PER_DAY % interval:
        raise ValueError(f"Hour interval must divide {HOURS_PER_DAY}, got {interval}")
    if width < HOURS_PER_DAY // interval or height < 1:
        raise ValueError(f"Plot of {width}x{height} is too small")

    plot, gutter_width = _plot_rows(hist, width, height, interval)
    gutter = " " * gutter_width

    max_hour, max_count = most_active_hour(hist)

    lines = plot + [
        gutter + hour_ruler(width, interval),
        gutter + hour_labels(width, interval),
        "",
        CAPTION.center(len(gutter) + width).rstrip(),
        "",
        "",
        f"Since {format_local_time(start)}, I'm most active between "
        f"{max_hour:02d}:00-{max_hour:02d}:59 - with {max_count:.0f} events "
        "in that hour.",
    ]
    return "\n".join(lines) + "\n"
