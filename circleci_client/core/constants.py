"""
Shared Constants

Wire-level constants for the CircleCI v1 REST API.
"""

from typing import Dict

# Base URL including the versioned path prefix
CIRCLECI_API_URL: str = "https://circleci.com/api/v1"

# Every request carries the token as this query parameter
TOKEN_QUERY_PARAM: str = "circle-token"

# Fixed headers sent with every request (no body is ever sent)
DEFAULT_HEADERS: Dict[str, str] = {"Accept": "application/json"}

# Service label used for logging and metrics
CIRCLECI_SERVICE_NAME: str = "CircleCI API"

# Transport timeout in seconds
DEFAULT_TIMEOUT: float = 30.0

# Query parameter names accepted by the branch-scoped recent builds endpoint
RECENT_BUILDS_LIMIT_PARAM: str = "limit"
RECENT_BUILDS_OFFSET_PARAM: str = "offset"
RECENT_BUILDS_FILTER_PARAM: str = "filter"
