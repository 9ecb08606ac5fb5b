"""
Infrastructure Layer Package

Implementations of the domain gateways and ports: the GitHub events client,
the zoneinfo time zone projector and the filesystem report writer.
"""
