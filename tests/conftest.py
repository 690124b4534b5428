"""
Shared fixtures for the Weebly Cloud SDK test suite
"""

import logging
from unittest.mock import MagicMock

import pytest

from weebly_cloud import ClientConfig, Credentials, WeeblyCloudClient, WeeblyHttpClient

TEST_PUBLIC_KEY = "test-public-key"
TEST_SECRET = "secret"


@pytest.fixture
def credentials():
    """API credentials with the secret used by the known vectors."""
    return Credentials(public_key=TEST_PUBLIC_KEY, secret=TEST_SECRET)


@pytest.fixture
def mock_response():
    """Successful response returned by the mocked session."""
    response = MagicMock()
    response.status_code = 200
    response.ok = True
    response.reason = 'OK'
    response.text = '{"success": true}'
    response.content = b'{"success": true}'
    return response


@pytest.fixture
def mock_session(mock_response):
    """requests.Session stand-in that never touches the network."""
    session = MagicMock()
    session.request.return_value = mock_response
    return session


@pytest.fixture
def http_client(mock_session):
    return WeeblyHttpClient(ClientConfig(), session=mock_session)


@pytest.fixture
def client(credentials, http_client):
    return WeeblyCloudClient(credentials, http_client=http_client)


@pytest.fixture
def sdk_logger():
    """SDK logger, restored after the test."""
    logger = logging.getLogger('weebly_cloud')
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
