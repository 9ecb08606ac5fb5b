from .zoneinfo_projector import DEFAULT_TIMEZONE, ZoneInfoProjector

__all__ = ["DEFAULT_TIMEZONE", "ZoneInfoProjector"]
