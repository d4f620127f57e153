"""Reusable CircleCI response payloads and a recording mock transport."""

from typing import Any, Callable, List, Optional, Type

import httpx

from circleci_client.services.circleci import AsyncCircleCIClient, CircleCIClient

TEST_TOKEN = "test-circle-token"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request and answers with a fixed response.

    Pass ``raises`` (an httpx exception class) to simulate a transport failure,
    or ``content`` to return a raw, possibly malformed, body.
    """

    def __init__(
        self,
        json_body: Any = None,
        status_code: int = 200,
        content: Optional[bytes] = None,
        raises: Optional[Type[httpx.HTTPError]] = None,
    ):
        self.requests: List[httpx.Request] = []
        self.json_body = json_body
        self.status_code = status_code
        self.content = content
        self.raises = raises
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises("simulated transport failure", request=request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class SequenceTransport(httpx.MockTransport):
    """MockTransport answering each request with the next handler in line."""

    def __init__(self, *handlers: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handlers = list(handlers)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handlers.pop(0)(request)


def make_client(transport: httpx.MockTransport, token: str = TEST_TOKEN, **kwargs) -> CircleCIClient:
    """Create a CircleCIClient wired to a mock transport."""
    return CircleCIClient(token, transport=transport, **kwargs)


def make_async_client(transport: httpx.MockTransport, token: str = TEST_TOKEN, **kwargs) -> AsyncCircleCIClient:
    return AsyncCircleCIClient(token, transport=transport, **kwargs)


def make_me_json(**kwargs):
    """GET /me payload with sensible defaults."""
    defaults = {
        "admin": False,
        "all_emails": ["dev@example.com", "dev@users.noreply.github.com"],
        "avatar_url": "https://avatars.githubusercontent.com/u/1234?v=3",
        "basic_email_prefs": "smart",
        "containers": 1,
        "created_at": "2014-01-13T21:09:37.548Z",
        "days_left_in_trial": 0,
        "dev_admin": False,
        "github_id": 1234,
        "github_oauth_scopes": ["user:email", "repo"],
        "last_viewed_changelog": "2015-03-31T18:01:22.164Z",
        "login": "octodev",
        "name": "Octo Dev",
        "parallelism": 1,
        "plan": "oss",
        "projects": {
            "https://github.com/segmentio/analytics-android": {"emails": "default", "on_dashboard": True},
        },
        "selected_email": "dev@example.com",
        "sign_in_count": 42,
        "trial_end": "2014-01-27T21:09:37.548Z",
    }
    defaults.update(kwargs)
    return defaults


def make_project_json(**kwargs):
    """One entry of the GET /projects payload."""
    defaults = {
        "aws": {"keypair": "deploy-key"},
        "branches": {
            "master": {
                "added_at": "2015-03-30T21:42:10.281Z",
                "build_num": 345,
                "outcome": "success",
                "pushed_at": "2015-03-31T17:58:03.813Z",
                "status": "success",
                "vcs_revision": "f3b8a0c7f0a2d5b6e2a0b8d1c9e3f4a5b6c7d8e9",
            }
        },
        "compile": "",
        "default_branch": "master",
        "dependencies": "",
        "extra": "",
        "feature_flags": {"junit": True, "oss": True},
        "followed": True,
        "has_usable_key": True,
        "parallel": 1,
        "reponame": "analytics-android",
        "scopes": ["write-settings", "view-builds", "read-settings", "trigger-builds"],
        "setup": "",
        "slack_webhook_url": "",
        "ssh_keys": [],
        "test": "",
        "username": "segmentio",
        "vcs_url": "https://github.com/segmentio/analytics-android",
    }
    defaults.update(kwargs)
    return defaults


def make_build_summary_json(**kwargs):
    """One entry of the recent-builds payloads."""
    defaults = {
        "all_commit_details": [
            {
                "author_date": "2015-03-31T10:58:01-07:00",
                "author_email": "dev@example.com",
                "author_login": "octodev",
                "author_name": "Octo Dev",
                "body": "",
                "branch": "master",
                "commit": "f3b8a0c7f0a2d5b6e2a0b8d1c9e3f4a5b6c7d8e9",
                "commit_url": "https://github.com/segmentio/analytics-android/commit/f3b8a0c",
                "committer_date": "2015-03-31T10:58:01-07:00",
                "committer_email": "dev@example.com",
                "committer_login": "octodev",
                "committer_name": "Octo Dev",
                "subject": "Bump version",
            }
        ],
        "author_date": "2015-03-31T10:58:01-07:00",
        "author_email": "dev@example.com",
        "author_name": "Octo Dev",
        "body": "",
        "branch": "master",
        "build_num": 345,
        "build_parameters": {},
        "build_time_millis": 215345,
        "build_url": "https://circleci.com/gh/segmentio/analytics-android/345",
        "canceled": False,
        "circle_yml": {"string": "test:\n  override:\n    - ./gradlew check\n"},
        "committer_date": "2015-03-31T10:58:01-07:00",
        "committer_email": "dev@example.com",
        "committer_name": "Octo Dev",
        "compare": "https://github.com/segmentio/analytics-android/compare/0a1b2c3...f3b8a0c",
        "feature_flags": {},
        "has_artifacts": True,
        "infrastructure_fail": False,
        "is_first_green_build": False,
        "lifecycle": "finished",
        "messages": [],
        "node": [
            {
                "image_id": "circletar-0123-4567",
                "port": 64535,
                "public_ip_addr": "54.0.0.1",
                "username": "ubuntu",
            }
        ],
        "oss": True,
        "outcome": "success",
        "parallel": 1,
        "previous": {"build_num": 344, "build_time_millis": 201234, "status": "success"},
        "previous_successful_build": {"build_num": 344, "build_time_millis": 201234, "status": "success"},
        "queued_at": "2015-03-31T17:58:05.312Z",
        "reponame": "analytics-android",
        "retry_of": 343,
        "ssh_users": [],
        "start_time": "2015-03-31T17:58:06.117Z",
        "status": "success",
        "stop_time": "2015-03-31T18:01:41.462Z",
        "subject": "Bump version",
        "timedout": False,
        "usage_queued_at": "2015-03-31T17:58:04.989Z",
        "user": {"email": "dev@example.com", "is_user": True, "login": "octodev", "name": "Octo Dev"},
        "username": "segmentio",
        "vcs_revision": "f3b8a0c7f0a2d5b6e2a0b8d1c9e3f4a5b6c7d8e9",
        "vcs_url": "https://github.com/segmentio/analytics-android",
        "why": "github",
    }
    defaults.update(kwargs)
    return defaults


def make_action_json(step: int, index: int = 0, **kwargs):
    defaults = {
        "bash_command": f"step-{step}",
        "command": f"step-{step}",
        "end_time": "2015-03-31T17:58:10.000Z",
        "exit_code": 0,
        "has_output": True,
        "index": index,
        "messages": [],
        "name": f"step-{step}",
        "parallel": True,
        "run_time_millis": 1200,
        "start_time": "2015-03-31T17:58:08.800Z",
        "status": "success",
        "step": step,
        "truncated": False,
        "type": "test",
    }
    defaults.update(kwargs)
    return defaults


def make_detailed_build_json(step_names=("Starting the build", "Restore source cache", "./gradlew check"), **kwargs):
    """GET /project/:user/:repo/:num payload; one single-action step per name, in order."""
    data = make_build_summary_json()
    data.update(
        {
            "owners": ["segmentio"],
            "pull_request_urls": ["https://github.com/segmentio/analytics-android/pull/346"],
            "steps": [
                {"name": name, "actions": [make_action_json(step=i, name=name, command=name, bash_command=name)]}
                for i, name in enumerate(step_names)
            ],
        }
    )
    data.update(kwargs)
    return data


def make_artifact_json(**kwargs):
    defaults = {
        "node_index": 0,
        "path": "/tmp/circle-artifacts.Xyz/analytics-debug.aar",
        "pretty_path": "$CIRCLE_ARTIFACTS/analytics-debug.aar",
        "url": "https://circle-artifacts.com/gh/segmentio/analytics-android/345/artifacts/0/tmp/analytics-debug.aar",
    }
    defaults.update(kwargs)
    return defaults


def make_build_json(**kwargs):
    """Payload returned by the trigger, retry and cancel actions."""
    defaults = {
        "body": "",
        "branch": "master",
        "build_num": 346,
        "build_time_millis": 0,
        "build_url": "https://circleci.com/gh/segmentio/analytics-android/346",
        "committer_email": "dev@example.com",
        "committer_name": "Octo Dev",
        "lifecycle": "queued",
        "previous": {"build_num": 345, "status": "success"},
        "queued_at": "2015-03-31T18:05:00.000Z",
        "reponame": "analytics-android",
        "retry_of": 345,
        "status": "not_running",
        "subject": "Bump version",
        "username": "segmentio",
        "vcs_revision": "f3b8a0c7f0a2d5b6e2a0b8d1c9e3f4a5b6c7d8e9",
        "vcs_url": "https://github.com/segmentio/analytics-android",
        "why": "retry",
    }
    defaults.update(kwargs)
    return defaults
