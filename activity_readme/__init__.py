"""Render a GitHub profile README from a user's recent public activity."""

__version__ = "0.1.0"
