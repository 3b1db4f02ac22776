"""
Global pytest configuration and fixtures for fast test execution.

Mocks outbound HTTP so no test reaches the real GitHub API, and provides
fake follower clients for runner and API tests.
"""

import pytest
from unittest.mock import patch, Mock

from connecticut.clients.follower_client import FollowerClient
from connecticut.utils.error_handling import ResolutionError


@pytest.fixture(autouse=True)
def mock_external_apis():
    """
    Auto-use fixture that mocks all external API calls.
    This prevents real network requests during testing.
    """
    with patch('requests.get') as mock_requests_get:

        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.headers = {}
        mock_response.json.return_value = []
        mock_requests_get.return_value = mock_response

        yield {
            'requests': mock_requests_get
        }


class FakeFollowerClient(FollowerClient):
    """Follower client answering from an in-memory follower map."""

    def __init__(self, follower_map, failures=None):
        super().__init__()
        self.follower_map = follower_map
        self.failures = failures or {}
        self.calls = []

    def resolve(self, identifier, credential=None):
        self.calls.append((identifier, credential))
        if identifier in self.failures:
            raise self.failures[identifier]
        return set(self.follower_map.get(identifier, []))


@pytest.fixture
def follower_map():
    """Follower map for the alice/bob/carol scenario."""
    return {
        "alice": ["bob"],
        "bob": ["alice", "carol"],
        "carol": []
    }


@pytest.fixture
def fake_client_factory():
    """Build FakeFollowerClient instances."""
    def factory(follower_map, failures=None):
        return FakeFollowerClient(follower_map, failures=failures)
    return factory


@pytest.fixture
def resolution_error():
    """A generic resolution failure for a given identifier."""
    def factory(identifier, error_class=ResolutionError):
        return error_class(f"lookup failed for {identifier}", identifier=identifier)
    return factory


@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt

    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)

    yield

    logging.getLogger().setLevel(logging.INFO)
