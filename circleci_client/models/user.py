"""
Pydantic models for the authenticated user (GET /me).
"""

from typing import Any, Dict, List, Optional, Union

from circleci_client.models.base import CircleCIModel


class FollowedProject(CircleCIModel):
    """Per-project notification preferences of the current user."""

    emails: Optional[str] = None
    on_dashboard: Optional[bool] = None


class Me(CircleCIModel):
    """Information about the authenticated user."""

    admin: Optional[bool] = None
    all_emails: Optional[List[str]] = None
    avatar_url: Optional[str] = None
    basic_email_prefs: Optional[str] = None
    containers: Optional[int] = None
    created_at: Optional[str] = None
    days_left_in_trial: Optional[int] = None
    dev_admin: Optional[bool] = None
    github_id: Optional[int] = None
    github_oauth_scopes: Optional[List[str]] = None
    gravatar_id: Optional[str] = None
    heroku_api_key: Optional[str] = None
    last_viewed_changelog: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    parallelism: Optional[int] = None
    # Either a plan identifier or a plan object, depending on the account
    plan: Optional[Union[str, Dict[str, Any]]] = None
    # Keyed by VCS URL
    projects: Optional[Dict[str, FollowedProject]] = None
    selected_email: Optional[str] = None
    sign_in_count: Optional[int] = None
    trial_end: Optional[str] = None
