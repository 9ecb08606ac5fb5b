"""
Infrastructure Gateway - GitHub Events

Retrieves a user's most recent events from the GitHub REST API.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from activity_readme.application.dtos.github_event_dto import GitHubEventDTO
from activity_readme.domain.entities.activity import ActivityRecord
from activity_readme.domain.entities.errors import (
    ActivityFeedError,
    MissingCredentialError,
)
from activity_readme.domain.gateways.activity_feed_gateway import IActivityFeedGateway
from activity_readme.shared import get_logger

logger = get_logger(__name__)

MAX_PER_PAGE = 100
GITHUB_API_VERSION = "2022-11-28"


class GitHubEventsGateway(IActivityFeedGateway):
    """HTTP client for ``GET /users/{username}/events``."""

    def __init__(
        self,
        api_url: str,
        token: Optional[str] = None,
        require_token: bool = True,
        timeout: float = 30.0,
    ):
        """
        Initialize the GitHub events gateway.

        Args:
            api_url: Base URL of the REST API (e.g. "https://api.github.com")
            token: Personal access token, sent as a bearer token
            require_token: Refuse to run anonymously when no token is set
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.token = token or None
        self.require_token = require_token
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def fetch_events(self, username: str, limit: int) -> List[ActivityRecord]:
        """Fetch up to ``limit`` events, most recent first."""

        if limit <= 0 or limit > MAX_PER_PAGE:
            raise ActivityFeedError(
                f"limit must be between 1 and {MAX_PER_PAGE}, got {limit}"
            )
        if self.require_token and not self.token:
            raise MissingCredentialError(
                "null token in environment, did you forget to set GITHUB_TOKEN?"
            )

        url = f"{self.api_url}/users/{quote(username, safe='')}/events"
        params = {"per_page": str(limit)}

        logger.info(
            "github.events.fetch",
            url=url,
            params=params,
            authenticated=self.token is not None,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "github.events.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise ActivityFeedError(
                f"GitHub HTTP error {e.response.status_code}: {e.response.text}",
                details={"status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("github.events.request_error", error=str(e), url=url)
            raise ActivityFeedError(f"GitHub request failed: {e}") from e

        except ValueError as e:
            logger.error("github.events.invalid_json", error=str(e), url=url)
            raise ActivityFeedError(f"GitHub returned invalid JSON: {e}") from e

        records = self._parse_events(payload)
        logger.info("github.events.fetched", username=username, count=len(records))
        return records[:limit]

    def _parse_events(self, payload: Any) -> List[ActivityRecord]:
        if not isinstance(payload, list):
            raise ActivityFeedError(
                "Unexpected GitHub events payload",
                details={"payload_type": type(payload).__name__},
            )

        try:
            return [GitHubEventDTO.model_validate(item).to_domain() for item in payload]
        except ValidationError as e:
            logger.error("github.events.parse_failed", error=str(e))
            raise ActivityFeedError(f"Failed to parse GitHub events: {e}") from e
