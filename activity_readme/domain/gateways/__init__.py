from .activity_feed_gateway import IActivityFeedGateway

__all__ = ["IActivityFeedGateway"]
