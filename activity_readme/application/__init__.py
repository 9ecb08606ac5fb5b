"""
Application Layer Package

Use cases orchestrating the activity feed, the domain services and the
report writer, plus the DTOs and option values they exchange.
"""

from activity_readme.application import dtos, models, use_cases

__all__ = ["dtos", "models", "use_cases"]
