"""Domain service turning the most recent records into a breadcrumb list."""

from __future__ import annotations

import warnings
from typing import Iterable, Mapping

from activity_readme.domain.entities.activity import ActivityRecord
from activity_readme.domain.entities.errors import UnmappedCategoryWarning
from activity_readme.domain.ports.time_zone_projector import ITimeZoneProjector
from activity_readme.domain.services.formatting import format_local_time
from activity_readme.shared import get_logger

logger = get_logger(__name__)

BREADCRUMBS_HEADER = "### 🍞 Bread Crumbs"

DEFAULT_CATEGORY_PHRASES: Mapping[str, str] = {
    "PushEvent": "🚢: Pushed some commits to",
    "CommitCommentEvent": "🗣: Commented on a commit in",
    "CreateEvent": "💥: Created a branch in",
    "DeleteEvent": "🗑: Deleted a branch in",
    "ForkEvent": "🍴: Forked",
    "IssueCommentEvent": "😃: Commented on an issue in",
    "IssuesEvent": "👀: Worked on an issue in",
    "MemberEvent": "👉: Prodded at the collaborators for",
    "PublicEvent": "🚀: Open sourced some code in",
    "ReleaseEvent": "🐿: Created a release in",
    "SponsorshipEvent": "💰: Sponsored a project in",
    "WatchEvent": "⭐️: Starred",
    "PullRequestEvent": "✍🏼: Created a pull request in",
    "PullRequestReviewEvent": "🔍: Reviewed a pull request in",
    "PullRequestReviewCommentEvent": "💬: Commented on a PR in",
}


def format_breadcrumbs(
    sample: Iterable[ActivityRecord],
    phrases: Mapping[str, str],
    projector: ITimeZoneProjector,
) -> str:
    """List each sampled record as ``* {phrase} `{group}` at {local time}``.

    Records whose category has no phrase are left out and reported with an
    ``UnmappedCategoryWarning``.
    """

    lines = [BREADCRUMBS_HEADER, ""]
    for record in sample:
        phrase = phrases.get(record.category)
        if not phrase:
            logger.warning("breadcrumbs.category_unmapped", category=record.category)
            warnings.warn(UnmappedCategoryWarning(record.category), stacklevel=2)
            continue
        when = format_local_time(projector(record.timestamp))
        lines.append(f" * {phrase} `{record.group}` at {when}")
    return "\n".join(lines) + "\n"
