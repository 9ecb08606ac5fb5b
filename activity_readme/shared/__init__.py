"""
Shared module - Cross-cutting concerns

Constants, enums and logging helpers used by every layer. This package must
not depend on the domain, application or infrastructure layers.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
