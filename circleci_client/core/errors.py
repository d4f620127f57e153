"""
Client Errors

Every operation either returns a fully decoded result or raises one of
these. Callers never see a partially populated value.
"""

from typing import Optional


class CircleCIError(Exception):
    """Base exception for CircleCI client failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CircleCITransportError(CircleCIError):
    """The request could not be built or the exchange did not complete.

    Raised for invalid URLs, DNS failures, refused connections and timeouts.
    The underlying httpx exception is chained as ``__cause__``.
    """


class _ResponseError(CircleCIError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CircleCIDecodeError(_ResponseError):
    """The service answered but the body could not be interpreted."""


class CircleCIStatusError(_ResponseError):
    """The service answered with a non-2xx status.

    Only raised by clients constructed with ``raise_for_status=True``.
    """
