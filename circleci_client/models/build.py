"""
Pydantic models for build summaries, build details and build actions.

BuildSummary mirrors the entries of the recent-builds endpoints,
DetailedBuildSummary the single build endpoint, and Build the synchronous
answer of the trigger, retry and cancel actions.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from circleci_client.models.base import CircleCIModel


class CommitDetails(CircleCIModel):
    """One commit included in a build."""

    author_date: Optional[str] = None
    author_email: Optional[str] = None
    author_login: Optional[str] = None
    author_name: Optional[str] = None
    body: Optional[str] = None
    branch: Optional[str] = None
    commit: Optional[str] = None
    commit_url: Optional[str] = None
    committer_date: Optional[str] = None
    committer_email: Optional[str] = None
    committer_login: Optional[str] = None
    committer_name: Optional[str] = None
    subject: Optional[str] = None


class CircleYml(CircleCIModel):
    string: Optional[str] = None


class BuildMessage(CircleCIModel):
    type: Optional[str] = None
    message: Optional[str] = None


class BuildNode(CircleCIModel):
    """Container a build ran on."""

    image_id: Optional[str] = None
    port: Optional[int] = None
    public_ip_addr: Optional[str] = None
    ssh_enabled: Optional[bool] = None
    username: Optional[str] = None


class PreviousBuild(CircleCIModel):
    build_num: Optional[int] = None
    build_time_millis: Optional[int] = None
    status: Optional[str] = None


class BuildUser(CircleCIModel):
    email: Optional[str] = None
    is_user: Optional[bool] = None
    login: Optional[str] = None
    name: Optional[str] = None


class BuildSummary(CircleCIModel):
    """Summary of a build."""

    all_commit_details: Optional[List[CommitDetails]] = None
    author_date: Optional[str] = None
    author_email: Optional[str] = None
    author_name: Optional[str] = None
    body: Optional[str] = None
    branch: Optional[str] = None
    build_num: Optional[int] = None
    build_parameters: Optional[Dict[str, Any]] = None
    build_time_millis: Optional[int] = None
    build_url: Optional[str] = None
    canceled: Optional[bool] = None
    canceler: Optional[BuildUser] = None
    circle_yml: Optional[CircleYml] = None
    committer_date: Optional[str] = None
    committer_email: Optional[str] = None
    committer_name: Optional[str] = None
    compare: Optional[str] = None
    dont_build: Optional[str] = None
    failed: Optional[bool] = None
    feature_flags: Optional[Dict[str, Any]] = None
    has_artifacts: Optional[bool] = None
    infrastructure_fail: Optional[bool] = None
    is_first_green_build: Optional[bool] = None
    job_name: Optional[str] = None
    lifecycle: Optional[str] = None
    messages: Optional[List[BuildMessage]] = None
    node: Optional[List[BuildNode]] = None
    oss: Optional[bool] = None
    outcome: Optional[str] = None
    parallel: Optional[int] = None
    previous: Optional[PreviousBuild] = None
    previous_successful_build: Optional[PreviousBuild] = None
    queued_at: Optional[str] = None
    reponame: Optional[str] = None
    retries: Optional[List[int]] = None
    retry_of: Optional[int] = None
    ssh_enabled: Optional[bool] = None
    ssh_users: Optional[List[Dict[str, Any]]] = None
    start_time: Optional[str] = None
    status: Optional[str] = None
    stop_time: Optional[str] = None
    subject: Optional[str] = None
    timedout: Optional[bool] = None
    usage_queued_at: Optional[str] = None
    user: Optional[BuildUser] = None
    username: Optional[str] = None
    vcs_revision: Optional[str] = None
    vcs_url: Optional[str] = None
    why: Optional[str] = None


class BuildAction(CircleCIModel):
    """A single command run inside a build step, on one node."""

    bash_command: Optional[str] = None
    canceled: Optional[bool] = None
    command: Optional[str] = None
    # "continue" is a Python keyword
    continue_: Optional[Union[bool, str]] = Field(default=None, alias="continue")
    end_time: Optional[str] = None
    exit_code: Optional[int] = None
    failed: Optional[bool] = None
    has_output: Optional[bool] = None
    index: Optional[int] = None
    infrastructure_fail: Optional[bool] = None
    messages: Optional[List[BuildMessage]] = None
    name: Optional[str] = None
    parallel: Optional[bool] = None
    run_time_millis: Optional[int] = None
    start_time: Optional[str] = None
    status: Optional[str] = None
    step: Optional[int] = None
    timedout: Optional[bool] = None
    truncated: Optional[bool] = None
    type: Optional[str] = None


class BuildStep(CircleCIModel):
    name: Optional[str] = None
    actions: Optional[List[BuildAction]] = None


class DetailedBuildSummary(BuildSummary):
    """Build summary plus the ordered step and action breakdown."""

    owners: Optional[List[str]] = None
    pull_request_urls: Optional[List[str]] = None
    steps: Optional[List[BuildStep]] = None


class Build(CircleCIModel):
    """Build returned by the trigger, retry and cancel actions."""

    body: Optional[str] = None
    branch: Optional[str] = None
    build_num: Optional[int] = None
    build_time_millis: Optional[int] = None
    build_url: Optional[str] = None
    committer_email: Optional[str] = None
    committer_name: Optional[str] = None
    dont_build: Optional[str] = None
    lifecycle: Optional[str] = None
    outcome: Optional[str] = None
    previous: Optional[PreviousBuild] = None
    queued_at: Optional[str] = None
    reponame: Optional[str] = None
    retry_of: Optional[int] = None
    start_time: Optional[str] = None
    status: Optional[str] = None
    stop_time: Optional[str] = None
    subject: Optional[str] = None
    username: Optional[str] = None
    vcs_revision: Optional[str] = None
    vcs_url: Optional[str] = None
    why: Optional[str] = None
