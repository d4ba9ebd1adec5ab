"""Integration test fixtures — Docker-based search backends.

Expects backends to be running, e.g.:
    docker run -d -p 9200:9200 -e discovery.type=single-node -e xpack.security.enabled=false elasticsearch:8.13.4
    docker run -d -p 9201:9200 -e discovery.type=single-node -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2

Tests are skipped when a backend is not reachable.
"""

from __future__ import annotations

import time
import uuid

import httpx
import pytest


def _wait_for_service(url: str, timeout: float = 60.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=10)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


@pytest.fixture
def section() -> str:
    """A section name unique to the test."""
    return f"it-events-{uuid.uuid4().hex[:8]}"


@pytest.fixture(scope="session")
def elasticsearch_ready() -> str:
    """Ensure Elasticsearch is running."""
    host = "http://localhost:9200"
    if not _wait_for_service(host, timeout=10.0):
        pytest.skip("Elasticsearch not available at localhost:9200")
    return host


@pytest.fixture(scope="session")
def opensearch_ready() -> str:
    """Ensure OpenSearch is running."""
    host = "http://localhost:9201"
    if not _wait_for_service(host, timeout=10.0):
        pytest.skip("OpenSearch not available at localhost:9201")
    return host
