"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
import httpx

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("BRANCH", "main")
    monkeypatch.setenv("REPO_OWNER", "octo")
    monkeypatch.setenv("REPO_NAME", "widgets")
    monkeypatch.setenv("TRAVIS_TOKEN", "travis_test_token")
    monkeypatch.setenv("TRAVIS_TLD", "com")
    for name in ("POLL_INTERVAL", "HTTP_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Settings loaded from the test environment."""
    from travis_job.core.config import Settings
    return Settings(_env_file=None)


@pytest.fixture
def make_travis_client():
    """
    Build a TravisClient whose HTTP traffic goes to ``handler``.

    Each captured ``httpx.Request`` is appended to the returned list.
    """
    from travis_job.services.travis import TravisClient

    def factory(handler):
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        client = TravisClient("travis_test_token", "octo", "widgets", "com", client=http_client)
        return client, requests

    return factory
