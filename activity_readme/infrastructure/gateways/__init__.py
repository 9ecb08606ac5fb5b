from .github_events_gateway import GitHubEventsGateway

__all__ = ["GitHubEventsGateway"]
