"""DTO describing the outcome of a report run."""

from __future__ import annotations

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, Field


class ReportResultDTO(BaseModel):
    """Summary of a generated report, logged by the entry point."""

    location: str = Field(description="Where the document was written")
    events: int = Field(description="Number of activity records aggregated")
    since: datetime = Field(description="Local time of the oldest record")
    most_active_hour: int = Field(ge=0, le=23, description="Busiest local hour")
    most_active_group: str = Field(description="Group with the most events")
    group_counts: Dict[str, int] = Field(
        default_factory=dict, description="Events per group"
    )
