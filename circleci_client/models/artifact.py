from typing import Optional

from circleci_client.models.base import CircleCIModel


class Artifact(CircleCIModel):
    """Artifact produced by a build, from GET /project/:user/:repo/:num/artifacts."""

    node_index: Optional[int] = None
    path: Optional[str] = None
    pretty_path: Optional[str] = None
    url: Optional[str] = None
