"""
Pydantic models for followed projects (GET /projects).
"""

from typing import Any, Dict, List, Optional, Union

from circleci_client.models.base import CircleCIModel


class AWSSettings(CircleCIModel):
    keypair: Optional[Union[str, Dict[str, Any]]] = None


class BranchStatus(CircleCIModel):
    """Latest build state of one branch."""

    added_at: Optional[str] = None
    build_num: Optional[int] = None
    outcome: Optional[str] = None
    pushed_at: Optional[str] = None
    status: Optional[str] = None
    vcs_revision: Optional[str] = None


class Project(CircleCIModel):
    """Information about a project followed by the current user."""

    aws: Optional[AWSSettings] = None
    # Keyed by branch name
    branches: Optional[Dict[str, BranchStatus]] = None
    campfire_notify_prefs: Optional[str] = None
    campfire_room: Optional[str] = None
    campfire_subdomain: Optional[str] = None
    campfire_token: Optional[str] = None
    compile: Optional[str] = None
    default_branch: Optional[str] = None
    dependencies: Optional[str] = None
    extra: Optional[str] = None
    feature_flags: Optional[Dict[str, Optional[bool]]] = None
    flowdock_api_token: Optional[str] = None
    followed: Optional[bool] = None
    has_usable_key: Optional[bool] = None
    heroku_deploy_user: Optional[str] = None
    hipchat_api_token: Optional[str] = None
    hipchat_notify: Optional[bool] = None
    hipchat_notify_prefs: Optional[str] = None
    hipchat_room: Optional[str] = None
    irc_channel: Optional[str] = None
    irc_keyword: Optional[str] = None
    irc_notify_prefs: Optional[str] = None
    irc_password: Optional[str] = None
    irc_server: Optional[str] = None
    irc_username: Optional[str] = None
    parallel: Optional[int] = None
    reponame: Optional[str] = None
    scopes: Optional[List[str]] = None
    setup: Optional[str] = None
    slack_api_token: Optional[str] = None
    slack_channel: Optional[str] = None
    slack_notify_prefs: Optional[str] = None
    slack_subdomain: Optional[str] = None
    slack_webhook_url: Optional[str] = None
    ssh_keys: Optional[List[Dict[str, Any]]] = None
    test: Optional[str] = None
    username: Optional[str] = None
    vcs_url: Optional[str] = None
