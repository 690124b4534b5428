"""
Tests for the HTTP transport
"""

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from weebly_cloud.exceptions import (
    ApiResponseError,
    ConnectionFailedError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from weebly_cloud.http_client import (
    ClientConfig,
    DEFAULT_BASE_URL,
    WeeblyHttpClient,
    raise_for_response,
)
from weebly_cloud.signing import create_signable_request, create_signer


@pytest.fixture
def signer(credentials):
    return create_signer(credentials)


def signed(signer, method, path, body=None):
    request = create_signable_request(method, path, body)
    return request, signer.sign_request(request)


class TestClientConfig:
    """Test client configuration"""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL == "https://api.weeblycloud.com/"
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.debug_logging is False
        assert config.raise_on_error is False

    def test_url_normalization(self):
        config = ClientConfig(base_url="https://sandbox.example.com/api")
        assert config.base_url == "https://sandbox.example.com/api/"

    def test_empty_url(self):
        with pytest.raises(ValidationError, match="Base URL cannot be empty"):
            ClientConfig(base_url="")

    @pytest.mark.parametrize("url", ["invalid-url", "ftp://api.example.com", "https://"])
    def test_invalid_url(self, url):
        with pytest.raises(ValidationError, match="Invalid base URL format"):
            ClientConfig(base_url=url)

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ValidationError, match="Timeout must be positive"):
            ClientConfig(timeout=timeout)


class TestWeeblyHttpClient:
    """Test sending signed requests"""

    def test_session_defaults(self):
        with patch('weebly_cloud.http_client.requests.Session') as session_cls:
            session_cls.return_value.headers = {}
            client = WeeblyHttpClient(ClientConfig())
        assert client.session.headers['Content-Type'] == 'application/json'
        assert client.session.headers['Accept'] == 'application/json'
        assert client.session.headers['User-Agent'].startswith('WeeblyCloud-Python-SDK/')

    def test_build_url(self, http_client):
        assert http_client.build_url('user/1/site') == 'https://api.weeblycloud.com/user/1/site'

    def test_send_with_body(self, http_client, mock_session, mock_response, signer):
        request, signature = signed(signer, 'POST', 'user', '{"email":"a@example.com"}')

        response = http_client.send(request, signature)

        assert response is mock_response
        mock_session.request.assert_called_once()
        args, kwargs = mock_session.request.call_args
        assert args == ('POST', 'https://api.weeblycloud.com/user')
        assert kwargs['data'] == b'{"email":"a@example.com"}'
        assert kwargs['headers']['Content-Type'] == 'application/json'
        assert kwargs['headers']['X-Public-Key'] == 'test-public-key'
        assert kwargs['headers']['X-Signed-Request-Hash'] == signature.signature
        assert kwargs['timeout'] == 30.0
        assert kwargs['verify'] is True

    def test_send_without_body(self, http_client, mock_session, signer):
        """Test that the [] placeholder is signed but not sent"""
        request, signature = signed(signer, 'GET', 'account')

        http_client.send(request, signature)

        _, kwargs = mock_session.request.call_args
        assert kwargs['data'] is None
        assert signature.canonical_message.endswith('\n[]')

    def test_non_ascii_body_sent_as_utf8(self, http_client, mock_session, signer):
        request, signature = signed(signer, 'PATCH', 'user/1/site/2', '{"site_title":"Café"}')
        http_client.send(request, signature)
        _, kwargs = mock_session.request.call_args
        assert kwargs['data'] == '{"site_title":"Café"}'.encode('utf-8')

    def test_error_response_returned(self, http_client, mock_session, signer):
        error_response = MagicMock(status_code=404, ok=False, reason='Not Found')
        mock_session.request.return_value = error_response
        request, signature = signed(signer, 'GET', 'user/999')

        assert http_client.send(request, signature) is error_response

    def test_raise_on_error(self, mock_session, signer):
        error_response = MagicMock(status_code=401, ok=False, reason='Unauthorized', url='https://x/account')
        mock_session.request.return_value = error_response
        client = WeeblyHttpClient(ClientConfig(raise_on_error=True), session=mock_session)
        request, signature = signed(signer, 'GET', 'account')

        with pytest.raises(ApiResponseError) as exc_info:
            client.send(request, signature)

        assert exc_info.value.http_status == 401
        assert exc_info.value.response is error_response
        assert exc_info.value.error_code == 'API_ERROR'

    def test_connection_error(self, http_client, mock_session, signer):
        mock_session.request.side_effect = requests.exceptions.ConnectionError("Name or service not known")
        request, signature = signed(signer, 'GET', 'account')

        with pytest.raises(ConnectionFailedError) as exc_info:
            http_client.send(request, signature)

        assert exc_info.value.error_code == 'CONNECTION_FAILED'
        assert exc_info.value.details['url'] == 'https://api.weeblycloud.com/account'

    def test_ssl_error_is_connection_failure(self, http_client, mock_session, signer):
        mock_session.request.side_effect = requests.exceptions.SSLError("certificate verify failed")
        request, signature = signed(signer, 'GET', 'account')

        with pytest.raises(ConnectionFailedError):
            http_client.send(request, signature)

    def test_timeout(self, http_client, mock_session, signer):
        mock_session.request.side_effect = requests.exceptions.ReadTimeout("timed out")
        request, signature = signed(signer, 'GET', 'account')

        with pytest.raises(RequestTimeoutError) as exc_info:
            http_client.send(request, signature)

        assert isinstance(exc_info.value, TransportError)
        assert exc_info.value.error_code == 'REQUEST_TIMEOUT'

    def test_other_request_error(self, http_client, mock_session, signer):
        mock_session.request.side_effect = requests.exceptions.InvalidURL("bad url")
        request, signature = signed(signer, 'GET', 'account')

        with pytest.raises(TransportError) as exc_info:
            http_client.send(request, signature)

        assert exc_info.value.error_code == 'TRANSPORT_ERROR'

    def test_close_and_context_manager(self, mock_session):
        with WeeblyHttpClient(ClientConfig(), session=mock_session):
            pass
        mock_session.close.assert_called_once()


class TestDebugLogging:
    """Opt-in wire logging never exposes credentials"""

    def test_debug_logging_redacts_credentials(self, mock_session, signer, caplog):
        client = WeeblyHttpClient(ClientConfig(debug_logging=True), session=mock_session)
        request, signature = signed(signer, 'PATCH', 'user/1/site/2', '{"domain":"x.com"}')

        with caplog.at_level(logging.DEBUG, logger='weebly_cloud'):
            client.send(request, signature)

        assert 'HTTP Request' in caplog.text
        assert 'HTTP Response' in caplog.text
        assert 'user/1/site/2' in caplog.text
        assert 'test-public-key' not in caplog.text
        assert signature.signature not in caplog.text
        assert 'x.com' not in caplog.text

    def test_default_logging_has_no_headers(self, http_client, signer, caplog):
        request, signature = signed(signer, 'GET', 'account')

        with caplog.at_level(logging.DEBUG, logger='weebly_cloud'):
            http_client.send(request, signature)

        assert 'Making GET request to https://api.weeblycloud.com/account' in caplog.text
        assert 'X-Public-Key' not in caplog.text


class TestRaiseForResponse:
    """Helper for callers that want exceptions"""

    def test_ok_response_passes_through(self):
        response = MagicMock(ok=True)
        assert raise_for_response(response) is response

    def test_error_response_raises(self):
        response = MagicMock(ok=False, status_code=500, reason='Server Error', url='https://x/plan')
        with pytest.raises(ApiResponseError, match="HTTP 500"):
            raise_for_response(response)
