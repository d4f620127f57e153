from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from circleci_client.core.constants import (
    RECENT_BUILDS_FILTER_PARAM,
    RECENT_BUILDS_LIMIT_PARAM,
    RECENT_BUILDS_OFFSET_PARAM,
)


class RecentBuildsOptions(BaseModel):
    """Optional refinement of the branch-scoped recent builds query.

    Unset values are left out of the query string entirely.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    # e.g. "completed", "successful", "failed", "running"
    filter: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        """Query parameters for the set values, in limit, offset, filter order."""
        params: Dict[str, str] = {}
        if self.limit is not None:
            params[RECENT_BUILDS_LIMIT_PARAM] = str(self.limit)
        if self.offset is not None:
            params[RECENT_BUILDS_OFFSET_PARAM] = str(self.offset)
        if self.filter is not None:
            params[RECENT_BUILDS_FILTER_PARAM] = self.filter
        return params
