"""
Domain Errors

Every failure carries the pipeline stage that raised it in ``details["stage"]``
so the entry point can report where a run stopped.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    stage: str = "unknown"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = {"stage": self.stage, **(details or {})}
        super().__init__(message)


class EmptyInputError(DomainError):
    """Raised when there is nothing to aggregate or chart."""

    def __init__(
        self,
        message: str,
        stage: str = "aggregate",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.stage = stage
        super().__init__(message, details)


class ProjectionError(DomainError):
    """Raised when timestamps cannot be projected into the target time zone."""

    stage = "project"

    def __init__(self, zone: str, details: Optional[Dict[str, Any]] = None):
        self.zone = zone
        super().__init__(f"Cannot resolve time zone {zone!r}", details)


class ActivityFeedError(DomainError):
    """Raised when the activity feed cannot be fetched or parsed."""

    stage = "fetch"


class MissingCredentialError(DomainError):
    """Raised when the activity feed requires a token and none is configured."""

    stage = "fetch"


class ReportWriteError(DomainError):
    """Raised when the rendered report cannot be persisted."""

    stage = "write"


class UnmappedCategoryWarning(UserWarning):
    """Issued when an activity category has no breadcrumb phrase."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"activity {category} is not mapped to a name")
