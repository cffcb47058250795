"""
Tests for Prometheus metrics middleware.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from catalog.middlewares.prometheus import PrometheusMiddleware, _endpoint_label


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.fixture
def client():
    """
    Create a client for an app with the Prometheus middleware.

    Returns:
        TestClient: Client that returns 500 responses instead of raising.
    """
    app = FastAPI()
    app.add_middleware(PrometheusMiddleware)

    @app.get("/prometheus-ok")
    async def ok():
        return {"ok": True}

    @app.get("/prometheus-crash")
    async def crash():
        raise RuntimeError("boom")

    return TestClient(app, raise_server_exceptions=False)


class TestPrometheusMiddleware:
    """Tests for PrometheusMiddleware class."""

    def test_counts_successful_request(self, client):
        """Test successful requests are counted and timed."""
        labels = {"method": "GET", "endpoint": "/prometheus-ok"}
        before = sample("http_requests_total", status_code="200", **labels)
        before_duration = sample("http_request_duration_seconds_count", **labels)

        client.get("/prometheus-ok")

        assert sample("http_requests_total", status_code="200", **labels) == before + 1
        assert (
            sample("http_request_duration_seconds_count", **labels)
            == before_duration + 1
        )

    def test_counts_failed_request_as_500(self, client):
        """Test requests raising an exception are counted as 500."""
        labels = {"method": "GET", "endpoint": "/prometheus-crash"}
        before = sample("http_requests_total", status_code="500", **labels)

        client.get("/prometheus-crash")

        assert sample("http_requests_total", status_code="500", **labels) == before + 1

    def test_in_progress_returns_to_zero(self, client):
        """Test the in-progress gauge is decremented after the request."""
        before = sample("http_requests_in_progress", method="GET")

        client.get("/prometheus-ok")

        assert sample("http_requests_in_progress", method="GET") == before


class TestEndpointLabel:
    """Tests for _endpoint_label function."""

    def test_uses_route_template(self):
        """Test matched routes are labelled with their path template."""
        request = MagicMock()
        request.scope = {"route": SimpleNamespace(path="/authors/{author_id}")}
        request.url.path = "/authors/a1"

        assert _endpoint_label(request) == "/authors/{author_id}"

    def test_falls_back_to_raw_path(self):
        """Test unmatched requests are labelled with the raw path."""
        request = MagicMock()
        request.scope = {}
        request.url.path = "/unknown"

        assert _endpoint_label(request) == "/unknown"
