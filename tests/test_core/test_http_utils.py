"""Tests for the instrumented httpx wrappers."""

import asyncio

import httpx
import pytest
from prometheus_client import REGISTRY

from circleci_client.core.http_utils import InstrumentedAsyncClient, InstrumentedClient
from tests.mocks.circleci import RecordingTransport

URL = httpx.URL("https://circleci.example.com/api/v1/me")


def _sample(name: str, service: str) -> float:
    return REGISTRY.get_sample_value(name, {"service": service}) or 0.0


class TestInstrumentedClientLifecycle:
    def test_request_before_start_raises(self):
        client = InstrumentedClient("Lifecycle Test")
        with pytest.raises(RuntimeError, match="Client not started"):
            client.request("GET", URL)

    def test_context_manager_starts_and_closes(self):
        client = InstrumentedClient("Lifecycle Test", transport=RecordingTransport(json_body={}))
        with client as started:
            assert started.is_started
        assert not client.is_started

    def test_start_is_idempotent(self):
        client = InstrumentedClient("Lifecycle Test", transport=RecordingTransport(json_body={}))
        client.start()
        first = client._client
        client.start()
        assert client._client is first
        client.close()

    def test_forwards_httpx_kwargs(self):
        transport = RecordingTransport(json_body={"ok": True})
        with InstrumentedClient("Lifecycle Test", transport=transport) as client:
            response = client.request("GET", URL, headers={"Accept": "application/json"})
        assert response.json() == {"ok": True}
        assert transport.last_request.headers["accept"] == "application/json"


class TestInstrumentedClientMetrics:
    def test_records_request_and_duration(self):
        service = "Metrics Success Test"
        before = _sample("external_api_requests_total", service)
        with InstrumentedClient(service, transport=RecordingTransport(json_body={})) as client:
            client.request("GET", URL)
        assert _sample("external_api_requests_total", service) == before + 1
        assert _sample("external_api_duration_seconds_count", service) >= 1
        assert _sample("external_api_errors_total", service) == 0

    def test_records_error_and_reraises(self):
        service = "Metrics Error Test"
        transport = RecordingTransport(raises=httpx.ConnectError)
        with InstrumentedClient(service, transport=transport) as client:
            with pytest.raises(httpx.ConnectError):
                client.request("GET", URL)
        assert _sample("external_api_requests_total", service) == 1
        assert _sample("external_api_errors_total", service) == 1


class TestInstrumentedAsyncClient:
    def test_request_before_start_raises(self):
        client = InstrumentedAsyncClient("Async Lifecycle Test")
        with pytest.raises(RuntimeError, match="Client not started"):
            asyncio.run(client.request("GET", URL))

    def test_request_and_close(self):
        service = "Async Metrics Test"
        transport = RecordingTransport(json_body={"login": "octodev"})

        async def run():
            async with InstrumentedAsyncClient(service, transport=transport) as client:
                response = await client.request("GET", URL)
                assert client.is_started
            assert not client.is_started
            return response

        response = asyncio.run(run())
        assert response.json() == {"login": "octodev"}
        assert _sample("external_api_requests_total", service) == 1
