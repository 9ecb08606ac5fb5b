"""Domain ports implemented by the infrastructure layer."""

from .report_writer import IReportWriter
from .time_zone_projector import ITimeZoneProjector

__all__ = ["IReportWriter", "ITimeZoneProjector"]
