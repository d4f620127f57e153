import logging
from functools import lru_cache
from typing import Any, Dict, List, NamedTuple, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from circleci_client.core.config import Settings, settings
from circleci_client.core.constants import (
    CIRCLECI_API_URL,
    CIRCLECI_SERVICE_NAME,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    TOKEN_QUERY_PARAM,
)
from circleci_client.core.errors import (
    CircleCIDecodeError,
    CircleCIStatusError,
    CircleCITransportError,
)
from circleci_client.core.http_utils import InstrumentedAsyncClient, InstrumentedClient
from circleci_client.models.artifact import Artifact
from circleci_client.models.build import Build, BuildSummary, DetailedBuildSummary
from circleci_client.models.cache import ClearCacheResponse
from circleci_client.models.project import Project
from circleci_client.models.user import Me
from circleci_client.schemas.recent_builds import RecentBuildsOptions

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class _Call(NamedTuple):
    """One HTTP exchange: verb, path below the API root, result shape, extra query."""

    method: str
    path: str
    result_type: Any
    params: Optional[Dict[str, str]] = None


class _CircleCIBase:
    """
    Request building and response decoding shared by the sync and async clients.

    Path parameters are substituted verbatim; the remote service is the only
    validator of account, repository and branch names.
    """

    def __init__(
        self,
        token: str,
        base_url: str = CIRCLECI_API_URL,
        raise_for_status: bool = False,
    ):
        if not token:
            raise ValueError("No CircleCI token configured")
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.raise_for_status = raise_for_status

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, **kwargs):
        """Build a client from CIRCLE_* settings (environment or .env)."""
        config = config or settings
        return cls(
            config.CIRCLE_TOKEN,
            base_url=config.CIRCLE_API_URL,
            timeout=config.CIRCLE_HTTP_TIMEOUT,
            raise_for_status=config.CIRCLE_RAISE_FOR_STATUS,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def endpoint(self, path: str, params: Optional[Dict[str, str]] = None) -> httpx.URL:
        """Full URL for ``path``: token first, then any optional parameters."""
        query = {TOKEN_QUERY_PARAM: self._token}
        if params:
            query.update(params)
        return httpx.URL(f"{self.base_url}{path}", params=query)

    def _transport_error(self, call: _Call, exc: Exception) -> CircleCITransportError:
        msg = f"Transport error during {call.method} {call.path} on {CIRCLECI_SERVICE_NAME}: {exc}"
        logger.warning(msg)
        return CircleCITransportError(msg)

    def _decode(self, call: _Call, response: httpx.Response) -> Any:
        status = response.status_code
        if not response.is_success:
            if self.raise_for_status:
                msg = f"HTTP {status} during {call.method} {call.path} on {CIRCLECI_SERVICE_NAME}"
                logger.warning(msg)
                raise CircleCIStatusError(msg, status_code=status, body=response.text)
            logger.warning(f"HTTP {status} during {call.method} {call.path}, decoding body anyway")

        # Strict: "345" is not an int and "yes" or 1 is not a bool
        try:
            return _adapter(call.result_type).validate_json(response.content, strict=True)
        except ValidationError as e:
            msg = f"Could not decode response of {call.method} {call.path} (HTTP {status}): {e}"
            logger.error(msg)
            raise CircleCIDecodeError(msg, status_code=status, body=response.text) from e

    # Operation table. Each method only describes the exchange; the sync and
    # async clients execute it.

    def _me(self) -> _Call:
        return _Call("GET", "/me", Me)

    def _projects(self) -> _Call:
        return _Call("GET", "/projects", List[Project])

    def _recent_builds(self) -> _Call:
        return _Call("GET", "/recent-builds", List[BuildSummary])

    def _recent_builds_for_project(self, username: str, project: str) -> _Call:
        return _Call("GET", f"/project/{username}/{project}", List[BuildSummary])

    def _recent_builds_for_project_branch(
        self,
        username: str,
        project: str,
        branch: str,
        options: Optional[RecentBuildsOptions] = None,
    ) -> _Call:
        params = options.to_params() if options is not None else None
        return _Call("GET", f"/project/{username}/{project}/tree/{branch}", List[BuildSummary], params)

    def _build_summary(self, username: str, project: str, num: int) -> _Call:
        return _Call("GET", f"/project/{username}/{project}/{num}", DetailedBuildSummary)

    def _artifacts(self, username: str, project: str, num: int) -> _Call:
        return _Call("GET", f"/project/{username}/{project}/{num}/artifacts", List[Artifact])

    def _retry(self, username: str, project: str, num: int) -> _Call:
        return _Call("POST", f"/project/{username}/{project}/{num}/retry", Build)

    def _cancel(self, username: str, project: str, num: int) -> _Call:
        return _Call("POST", f"/project/{username}/{project}/{num}/cancel", Build)

    def _build(self, username: str, project: str, branch: str) -> _Call:
        return _Call("POST", f"/project/{username}/{project}/tree/{branch}", Build)

    def _clear_cache(self, username: str, project: str) -> _Call:
        return _Call("DELETE", f"/project/{username}/{project}/build-cache", ClearCacheResponse)


class CircleCIClient(_CircleCIBase):
    """
    Synchronous client for the CircleCI v1 REST API.

    Each operation performs exactly one HTTP exchange. There is no retry and
    no caching; failures raise CircleCITransportError or CircleCIDecodeError
    (and CircleCIStatusError when ``raise_for_status`` is enabled).

    Usage:
        with CircleCIClient(token) as circle:
            build = circle.build_summary("segmentio", "analytics-android", 345)

    Extra keyword arguments (``transport``, ``proxy``, ...) go to httpx.Client.
    """

    def __init__(
        self,
        token: str,
        base_url: str = CIRCLECI_API_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        raise_for_status: bool = False,
        **kwargs,
    ):
        super().__init__(token, base_url=base_url, raise_for_status=raise_for_status)
        self._client = InstrumentedClient(CIRCLECI_SERVICE_NAME, timeout=timeout, **kwargs)
        self._client.start()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CircleCIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _execute(self, call: _Call) -> Any:
        logger.debug(f"{CIRCLECI_SERVICE_NAME} {call.method} {call.path}")
        try:
            url = self.endpoint(call.path, call.params)
            response = self._client.request(call.method, url, headers=DEFAULT_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._transport_error(call, e) from e
        return self._decode(call, response)

    def me(self) -> Me:
        """Information about the authenticated user."""
        return self._execute(self._me())

    def projects(self) -> List[Project]:
        """Projects followed by the authenticated user."""
        return self._execute(self._projects())

    def recent_builds(self) -> List[BuildSummary]:
        """Summaries of the most recent builds across all followed projects."""
        return self._execute(self._recent_builds())

    def recent_builds_for_project(self, username: str, project: str) -> List[BuildSummary]:
        return self._execute(self._recent_builds_for_project(username, project))

    def recent_builds_for_project_branch(
        self,
        username: str,
        project: str,
        branch: str,
        options: Optional[RecentBuildsOptions] = None,
    ) -> List[BuildSummary]:
        """
        Summaries of recent builds for a single branch.

        Args:
            username: Account owning the repository
            project: Repository name
            branch: Branch name, used verbatim in the path (e.g. "pull/346")
            options: Optional limit, offset and status filter
        """
        return self._execute(self._recent_builds_for_project_branch(username, project, branch, options))

    def build_summary(self, username: str, project: str, num: int) -> DetailedBuildSummary:
        """Detailed summary of one build, including its ordered steps and actions."""
        return self._execute(self._build_summary(username, project, num))

    def artifacts(self, username: str, project: str, num: int) -> List[Artifact]:
        return self._execute(self._artifacts(username, project, num))

    def retry(self, username: str, project: str, num: int) -> Build:
        """Retry a build. Returns the newly queued build."""
        return self._execute(self._retry(username, project, num))

    def cancel(self, username: str, project: str, num: int) -> Build:
        return self._execute(self._cancel(username, project, num))

    def build(self, username: str, project: str, branch: str) -> Build:
        """Trigger a new build of ``branch``."""
        return self._execute(self._build(username, project, branch))

    def clear_cache(self, username: str, project: str) -> ClearCacheResponse:
        """Delete the project's build cache."""
        return self._execute(self._clear_cache(username, project))


class AsyncCircleCIClient(_CircleCIBase):
    """
    asyncio counterpart of CircleCIClient with the same operations as coroutines.

    Usage:
        async with AsyncCircleCIClient(token) as circle:
            builds = await circle.recent_builds()
    """

    def __init__(
        self,
        token: str,
        base_url: str = CIRCLECI_API_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        raise_for_status: bool = False,
        **kwargs,
    ):
        super().__init__(token, base_url=base_url, raise_for_status=raise_for_status)
        self._client = InstrumentedAsyncClient(CIRCLECI_SERVICE_NAME, timeout=timeout, **kwargs)

    async def aclose(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "AsyncCircleCIClient":
        await self._client.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _execute(self, call: _Call) -> Any:
        await self._client.start()
        logger.debug(f"{CIRCLECI_SERVICE_NAME} {call.method} {call.path}")
        try:
            url = self.endpoint(call.path, call.params)
            response = await self._client.request(call.method, url, headers=DEFAULT_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._transport_error(call, e) from e
        return self._decode(call, response)

    async def me(self) -> Me:
        return await self._execute(self._me())

    async def projects(self) -> List[Project]:
        return await self._execute(self._projects())

    async def recent_builds(self) -> List[BuildSummary]:
        return await self._execute(self._recent_builds())

    async def recent_builds_for_project(self, username: str, project: str) -> List[BuildSummary]:
        return await self._execute(self._recent_builds_for_project(username, project))

    async def recent_builds_for_project_branch(
        self,
        username: str,
        project: str,
        branch: str,
        options: Optional[RecentBuildsOptions] = None,
    ) -> List[BuildSummary]:
        return await self._execute(self._recent_builds_for_project_branch(username, project, branch, options))

    async def build_summary(self, username: str, project: str, num: int) -> DetailedBuildSummary:
        return await self._execute(self._build_summary(username, project, num))

    async def artifacts(self, username: str, project: str, num: int) -> List[Artifact]:
        return await self._execute(self._artifacts(username, project, num))

    async def retry(self, username: str, project: str, num: int) -> Build:
        return await self._execute(self._retry(username, project, num))

    async def cancel(self, username: str, project: str, num: int) -> Build:
        return await self._execute(self._cancel(username, project, num))

    async def build(self, username: str, project: str, branch: str) -> Build:
        return await self._execute(self._build(username, project, branch))

    async def clear_cache(self, username: str, project: str) -> ClearCacheResponse:
        return await self._execute(self._clear_cache(username, project))
