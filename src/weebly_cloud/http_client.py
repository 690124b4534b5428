"""
HTTP transport for Weebly Cloud API communication

This module sends signed requests to the Weebly Cloud API and hands the raw
response back. It neither retries nor interprets response bodies.
"""

import time
import logging
from typing import Dict, Optional
from urllib.parse import urljoin, urlparse
from dataclasses import dataclass

import requests

from .exceptions import (
    ApiResponseError,
    ConnectionFailedError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from .signing.types import SignableRequest, SignatureResult
from .signing.utils import redact_headers
from .version import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.weeblycloud.com/"


@dataclass
class ClientConfig:
    """Configuration for Weebly Cloud API connection."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = f"WeeblyCloud-Python-SDK/{__version__}"
    debug_logging: bool = False
    raise_on_error: bool = False

    def __post_init__(self):
        """Validate client configuration."""
        if not self.base_url:
            raise ValidationError("Base URL cannot be empty")

        # Ensure base_url ends with /
        if not self.base_url.endswith('/'):
            self.base_url += '/'

        parsed = urlparse(self.base_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValidationError(f"Invalid base URL format: {self.base_url}")

        if self.timeout <= 0:
            raise ValidationError("Timeout must be positive")


def raise_for_response(response: requests.Response) -> requests.Response:
    """
    Raise ApiResponseError for a non-2xx response.

    Args:
        response: Response returned by the client

    Returns:
        requests.Response: The same response when successful

    Raises:
        ApiResponseError: If the server rejected the request
    """
    if response.ok:
        return response
    raise ApiResponseError(
        f"Weebly Cloud API request failed: HTTP {response.status_code} {response.reason}",
        http_status=response.status_code,
        response=response,
        details={'url': response.url}
    )


class WeeblyHttpClient:
    """
    HTTP client that transmits signed requests.

    One instance wraps one requests.Session and may be shared between threads.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Connection settings
            session: Optional existing session to send requests with
        """
        self.config = config or ClientConfig()
        self.session = session or self._create_session()

        logger.info(f"Initialized Weebly Cloud HTTP client for: {self.config.base_url}")

    def _create_session(self) -> requests.Session:
        """Create HTTP session with default headers."""
        session = requests.Session()
        session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'User-Agent': self.config.user_agent,
        })
        return session

    def build_url(self, path: str) -> str:
        return urljoin(self.config.base_url, path)

    def send(self, request: SignableRequest, signature: SignatureResult) -> requests.Response:
        """
        Send a signed request.

        The body is transmitted only when the request has a payload; the
        "[]" placeholder used for signing never goes on the wire.

        Args:
            request: The request that was signed
            signature: Its signature result

        Returns:
            requests.Response: Raw server response

        Raises:
            TransportError: On network failure
            ApiResponseError: On non-2xx status when raise_on_error is set
        """
        url = self.build_url(request.path)
        headers: Dict[str, str] = {'Content-Type': 'application/json'}
        headers.update(signature.headers)
        data = request.body.encode('utf-8') if request.has_payload else None

        if self.config.debug_logging:
            log_data = {
                "method": request.method.value,
                "url": url,
                "headers": redact_headers(headers),
                "body_bytes": len(data) if data else 0,
            }
            logger.debug(f"HTTP Request: {log_data}")
        else:
            logger.debug(f"Making {request.method.value} request to {url}")

        started = time.perf_counter()
        try:
            response = self.session.request(
                request.method.value,
                url,
                data=data,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.Timeout:
            raise RequestTimeoutError(
                f"Request timeout after {self.config.timeout} seconds",
                details={'method': request.method.value, 'url': url}
            )
        except requests.exceptions.ConnectionError as e:
            raise ConnectionFailedError(
                f"Connection error: {e}",
                details={'method': request.method.value, 'url': url}
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request failed: {e}",
                details={'method': request.method.value, 'url': url}
            )

        if self.config.debug_logging:
            elapsed_ms = (time.perf_counter() - started) * 1000
            log_data = {
                "status_code": response.status_code,
                "elapsed_ms": f"{elapsed_ms:.2f}",
                "url": url,
            }
            logger.debug(f"HTTP Response: {log_data}")

        if self.config.raise_on_error:
            raise_for_response(response)
        return response

    def close(self):
        """Close the HTTP session."""
        self.session.close()
        logger.debug("HTTP session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
