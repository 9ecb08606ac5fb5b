"""Domain port for projecting absolute instants onto a local wall clock."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ITimeZoneProjector(Protocol):
    """Pure function from an aware instant to local time in a fixed zone."""

    def __call__(self, instant: datetime) -> datetime:
        """
        Raises:
            ProjectionError: When the target zone cannot be resolved.
        """
        ...
