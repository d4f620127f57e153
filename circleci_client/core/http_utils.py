"""
HTTP Utilities

Instrumented wrappers around httpx clients. Every request made through them
is counted and timed in the external API metrics.
"""

from typing import Optional

import httpx

from circleci_client.core.constants import DEFAULT_TIMEOUT
from circleci_client.core.log_utils import install_sensitive_log_filter
from circleci_client.core.metrics import track_external_api


_NOT_STARTED_MSG = "Client not started. Use 'with' or call start()."

install_sensitive_log_filter()


class InstrumentedClient:
    """
    A wrapper around httpx.Client that automatically records metrics.

    Usage:
        with InstrumentedClient("CircleCI API", timeout=30.0) as client:
            response = client.request("GET", url)

    Extra keyword arguments (e.g. ``transport``) are passed to httpx.Client.
    """

    def __init__(
        self,
        service_name: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        **kwargs,
    ):
        self.service_name = service_name
        self._client: Optional[httpx.Client] = None
        self._timeout = timeout
        self._kwargs = kwargs

    @property
    def is_started(self) -> bool:
        return self._client is not None

    def start(self) -> None:
        """Start the underlying client (for long-lived usage)."""
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout, **self._kwargs)

    def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "InstrumentedClient":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def request(self, method: str, url: httpx.URL, **kwargs) -> httpx.Response:
        """Make an HTTP request with metrics."""
        if self._client is None:
            raise RuntimeError(_NOT_STARTED_MSG)

        with track_external_api(self.service_name):
            return self._client.request(method, url, **kwargs)


class InstrumentedAsyncClient:
    """
    A wrapper around httpx.AsyncClient that automatically records metrics.

    Usage:
        async with InstrumentedAsyncClient("CircleCI API", timeout=30.0) as client:
            response = await client.request("GET", url)
    """

    def __init__(
        self,
        service_name: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        **kwargs,
    ):
        self.service_name = service_name
        self._client: Optional[httpx.AsyncClient] = None
        self._timeout = timeout
        self._kwargs = kwargs

    @property
    def is_started(self) -> bool:
        return self._client is not None

    async def start(self) -> None:
        """Start the underlying client (for long-lived usage)."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, **self._kwargs)

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "InstrumentedAsyncClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def request(self, method: str, url: httpx.URL, **kwargs) -> httpx.Response:
        """Make an HTTP request with metrics."""
        if self._client is None:
            raise RuntimeError(_NOT_STARTED_MSG)

        with track_external_api(self.service_name):
            return await self._client.request(method, url, **kwargs)
