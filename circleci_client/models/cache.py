from typing import Optional

from circleci_client.models.base import CircleCIModel


class ClearCacheResponse(CircleCIModel):
    """Status of clearing a project's build cache."""

    status: Optional[str] = None
