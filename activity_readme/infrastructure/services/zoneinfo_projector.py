"""Time zone projection backed by the IANA database (``zoneinfo``)."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from activity_readme.domain.entities.errors import ProjectionError
from activity_readme.shared import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEZONE = "America/Los_Angeles"


class ZoneInfoProjector:
    """Projects instants onto the wall clock of one fixed zone."""

    def __init__(self, zone: str = DEFAULT_TIMEZONE) -> None:
        try:
            self._zone = ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.error("projector.zone_not_found", zone=zone, error=str(e))
            raise ProjectionError(zone) from e
        self.zone = zone

    def __call__(self, instant: datetime) -> datetime:
        # naive instants from the feed are UTC
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(self._zone)
