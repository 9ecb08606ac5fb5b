"""
Domain Layer Package

Activity entities, the aggregation and rendering services, and the
interfaces of the collaborators the pipeline depends on. Nothing here
performs I/O.
"""

from activity_readme.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
