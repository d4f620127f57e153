"""
Typed client for the CircleCI v1 REST API.

    from circleci_client import CircleCIClient, RecentBuildsOptions

    with CircleCIClient(token) as circle:
        builds = circle.recent_builds_for_project_branch(
            "segmentio", "analytics-android", "master", RecentBuildsOptions(limit=2)
        )
"""

from circleci_client.core.errors import (
    CircleCIDecodeError,
    CircleCIError,
    CircleCIStatusError,
    CircleCITransportError,
)
from circleci_client.models import (
    Artifact,
    Build,
    BuildSummary,
    ClearCacheResponse,
    DetailedBuildSummary,
    Me,
    Project,
)
from circleci_client.schemas import RecentBuildsOptions
from circleci_client.services import AsyncCircleCIClient, CircleCIClient

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "AsyncCircleCIClient",
    "Build",
    "BuildSummary",
    "CircleCIClient",
    "CircleCIDecodeError",
    "CircleCIError",
    "CircleCIStatusError",
    "CircleCITransportError",
    "ClearCacheResponse",
    "DetailedBuildSummary",
    "Me",
    "Project",
    "RecentBuildsOptions",
]
