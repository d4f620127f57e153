"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any package imports so the settings
singleton never picks up a developer's real token.
"""

import os
import sys

# Ensure the package is importable without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["CIRCLE_TOKEN"] = "env-circle-token"
os.environ["CIRCLE_API_URL"] = "https://circleci.example.com/api/v1"
os.environ.pop("CIRCLE_HTTP_TIMEOUT", None)
os.environ.pop("CIRCLE_RAISE_FOR_STATUS", None)

import pytest  # noqa: E402

from tests.mocks.circleci import (  # noqa: E402
    RecordingTransport,
    make_build_summary_json,
    make_client,
    make_detailed_build_json,
)


@pytest.fixture
def transport():
    """Mock transport answering every request with an empty JSON object."""
    return RecordingTransport(json_body={})


@pytest.fixture
def client(transport):
    circle = make_client(transport)
    yield circle
    circle.close()


@pytest.fixture
def build_summary_json():
    return make_build_summary_json()


@pytest.fixture
def detailed_build_json():
    return make_detailed_build_json()
