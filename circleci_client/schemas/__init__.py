"""
Schema Exports

Request-side schemas used to refine CircleCI queries.
"""

from circleci_client.schemas.recent_builds import RecentBuildsOptions

__all__ = ["RecentBuildsOptions"]
