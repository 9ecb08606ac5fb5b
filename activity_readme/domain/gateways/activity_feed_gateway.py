"""
Domain Gateway - Activity Feed

Interface for retrieving a user's recent activity records.
"""

from abc import ABC, abstractmethod
from typing import List

from activity_readme.domain.entities.activity import ActivityRecord


class IActivityFeedGateway(ABC):
    """Interface for activity feed gateways."""

    @abstractmethod
    async def fetch_events(self, username: str, limit: int) -> List[ActivityRecord]:
        """
        Fetch the most recent activity records of a user.

        Args:
            username: Account whose activity is requested
            limit: Maximum number of records (at most 100 per request)

        Returns:
            Records ordered most-recent-first

        Raises:
            ActivityFeedError: When the feed cannot be retrieved or parsed
            MissingCredentialError: When a token is required but missing
        """
        pass
