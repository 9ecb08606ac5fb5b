"""
Domain Entities Package

Activity records, aggregate statistics and the domain error taxonomy.
"""

from .activity import HOURS_PER_DAY, ActivityRecord, AggregateStats
from .errors import (
    ActivityFeedError,
    DomainError,
    EmptyInputError,
    MissingCredentialError,
    ProjectionError,
    ReportWriteError,
    UnmappedCategoryWarning,
)

__all__ = [
    "HOURS_PER_DAY",
    "ActivityRecord",
    "AggregateStats",
    "DomainError",
    "EmptyInputError",
    "ProjectionError",
    "ActivityFeedError",
    "MissingCredentialError",
    "ReportWriteError",
    "UnmappedCategoryWarning",
]
