"""
Command Entry Point - Main Layer

Bootstraps logging and settings, builds the container and runs the report
use case once. Exit status is 0 on success and 1 when any stage fails.
"""

import asyncio

from pydantic import ValidationError

from activity_readme.domain.entities.errors import DomainError
from activity_readme.main.config import get_settings
from activity_readme.main.container import init_container
from activity_readme.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


def main() -> int:
    """Generate the activity README."""

    # Basic logging first so settings loading can log
    configure_logging()

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("report.failed", stage="config", error=str(e))
        return 1

    update_logging_from_settings(settings)

    container = init_container(settings)

    logger.info(
        "report.start",
        username=settings.github.username,
        output=settings.output.path,
        timezone=settings.report.timezone,
    )

    try:
        use_case = container.generate_report_use_case()
        result = asyncio.run(use_case.execute())
    except DomainError as e:
        logger.error(
            "report.failed",
            stage=e.details.get("stage"),
            error=e.message,
            details=e.details,
        )
        return 1

    logger.info(
        "report.done",
        location=result.location,
        events=result.events,
        most_active_hour=result.most_active_hour,
        most_active_group=result.most_active_group,
    )
    return 0
