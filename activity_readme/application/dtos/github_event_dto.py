"""DTOs for the GitHub public events payload."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from activity_readme.domain.entities.activity import ActivityRecord


class GitHubRepoDTO(BaseModel):
    """Repository reference embedded in an event."""

    name: str = Field(description="Full repository name, e.g. owner/repo")

    model_config = ConfigDict(extra="ignore")


class GitHubEventDTO(BaseModel):
    """Subset of a GitHub event needed to build an activity record."""

    id: str = Field(description="Event identifier")
    type: str = Field(description="Event type, e.g. PushEvent")
    repo: GitHubRepoDTO = Field(description="Repository the event happened in")
    created_at: datetime = Field(description="Creation instant (UTC)")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": "29847561234",
                "type": "PushEvent",
                "repo": {"name": "openconfig/featureprofiles"},
                "created_at": "2021-05-01T16:30:00Z",
            }
        },
    )

    def to_domain(self) -> ActivityRecord:
        return ActivityRecord(
            timestamp=self.created_at,
            category=self.type,
            group=self.repo.name,
        )
