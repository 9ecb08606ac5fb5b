"""
Dependency container injection module - Main Layer

Composition root wiring the GitHub gateway, the time zone projector and the
report writer into the report use case.
"""

from dependency_injector import containers, providers

from activity_readme.application.models import ReportOptions
from activity_readme.application.use_cases.generate_report_use_case import (
    GenerateActivityReportUseCase,
)
from activity_readme.domain.services.breadcrumb_formatter import (
    DEFAULT_CATEGORY_PHRASES,
)
from activity_readme.infrastructure.gateways.github_events_gateway import (
    GitHubEventsGateway,
)
from activity_readme.infrastructure.services.zoneinfo_projector import (
    ZoneInfoProjector,
)
from activity_readme.infrastructure.storage.file_report_writer import (
    FileReportWriter,
)
from activity_readme.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    # Settings
    config = providers.Configuration()

    # Infrastructure
    feed_gateway = providers.Singleton(
        GitHubEventsGateway,
        api_url=config.github.api_url,
        token=config.github.token,
        require_token=config.github.require_token,
        timeout=config.github.timeout,
    )

    projector = providers.Singleton(
        ZoneInfoProjector,
        zone=config.report.timezone,
    )

    report_writer = providers.Singleton(
        FileReportWriter,
        path=config.output.path,
    )

    # Application
    report_options = providers.Singleton(
        ReportOptions,
        username=config.github.username,
        fetch_limit=config.github.fetch_limit,
        plot_width=config.report.plot_width,
        plot_height=config.report.plot_height,
        hour_interval=config.report.hour_interval,
        sample_size=config.report.sample_size,
        attribution=config.report.attribution,
    )

    category_phrases = providers.Object(DEFAULT_CATEGORY_PHRASES)

    generate_report_use_case = providers.Factory(
        GenerateActivityReportUseCase,
        feed_gateway=feed_gateway,
        projector=projector,
        report_writer=report_writer,
        options=report_options,
        phrases=category_phrases,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug("container.initialized", username=settings.github.username)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
