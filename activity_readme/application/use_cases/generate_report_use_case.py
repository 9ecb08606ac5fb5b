"""
Application Use Case - Generate Activity Report

Fetches a user's recent events, aggregates them, renders the document and
hands it to the report writer.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

import structlog

from activity_readme.application.dtos.report_dto import ReportResultDTO
from activity_readme.application.models.report_options import ReportOptions
from activity_readme.domain.gateways.activity_feed_gateway import IActivityFeedGateway
from activity_readme.domain.ports.report_writer import IReportWriter
from activity_readme.domain.ports.time_zone_projector import ITimeZoneProjector
from activity_readme.domain.services.breadcrumb_formatter import (
    DEFAULT_CATEGORY_PHRASES,
)
from activity_readme.domain.services.group_bar_renderer import most_active_group
from activity_readme.domain.services.hour_plot_renderer import most_active_hour
from activity_readme.domain.services.stats_aggregator import aggregate
from activity_readme.domain.services.summary_formatter import SummaryFormatter

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenerateActivityReportUseCase:
    """Use case producing and storing the activity README."""

    def __init__(
        self,
        feed_gateway: IActivityFeedGateway,
        projector: ITimeZoneProjector,
        report_writer: IReportWriter,
        options: ReportOptions,
        phrases: Mapping[str, str] = DEFAULT_CATEGORY_PHRASES,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._feed_gateway = feed_gateway
        self._projector = projector
        self._report_writer = report_writer
        self._options = options
        self._clock = clock or _utc_now
        self._formatter = SummaryFormatter(
            projector=projector,
            attribution=options.attribution,
            phrases=phrases,
            plot_width=options.plot_width,
            plot_height=options.plot_height,
            hour_interval=options.hour_interval,
        )

    async def execute(self) -> ReportResultDTO:
        """
        Run the whole pipeline once.

        Raises:
            DomainError: The subclass names the stage that failed
                (fetch, aggregate, project, render_group_bars or write).
        """
        records = await self._feed_gateway.fetch_events(
            self._options.username, self._options.fetch_limit
        )
        logger.info(
            "report.events_fetched",
            username=self._options.username,
            count=len(records),
        )

        stats = aggregate(records, self._projector, self._options.sample_size)
        document = self._formatter.format(stats, self._projector(self._clock()))
        location = self._report_writer.write(document)

        hour, _ = most_active_hour(stats.hour_histogram)
        group, _ = most_active_group(stats.group_counts)

        logger.info(
            "report.generated",
            location=location,
            events=stats.total,
            most_active_hour=hour,
            most_active_group=group,
        )

        return ReportResultDTO(
            location=location,
            events=stats.total,
            since=stats.start,
            most_active_hour=hour,
            most_active_group=group,
            group_counts=dict(stats.group_counts),
        )
