"""
Weebly Cloud Python SDK
HMAC-signed client for the Weebly Cloud hosting API
"""

from .version import __version__
from .exceptions import (
    WeeblyCloudError,
    ValidationError,
    ConfigurationError,
    TransportError,
    ConnectionFailedError,
    RequestTimeoutError,
    ApiResponseError,
)
from .signing import (
    EMPTY_BODY,
    HttpMethod,
    Credentials,
    SignableRequest,
    SignatureResult,
    SigningError,
    HmacSigner,
    build_canonical_message,
    create_signer,
    sign,
    sign_request,
)
from .options import (
    is_blank,
    compact_options,
    merge_payload,
)
from .endpoints import (
    Endpoint,
    ENDPOINTS,
    get_endpoint,
)
from .http_client import (
    ClientConfig,
    WeeblyHttpClient,
    DEFAULT_BASE_URL,
    raise_for_response,
)
from .client import (
    WeeblyCloudClient,
    create_client,
)
from .config import (
    Settings,
    load_settings,
    configure_logging,
)

# Public API exports
__all__ = [
    '__version__',
    # Exceptions
    'WeeblyCloudError',
    'ValidationError',
    'ConfigurationError',
    'TransportError',
    'ConnectionFailedError',
    'RequestTimeoutError',
    'ApiResponseError',
    # Request Signing
    'EMPTY_BODY',
    'HttpMethod',
    'Credentials',
    'SignableRequest',
    'SignatureResult',
    'SigningError',
    'HmacSigner',
    'build_canonical_message',
    'create_signer',
    'sign',
    'sign_request',
    # Sparse options
    'is_blank',
    'compact_options',
    'merge_payload',
    # Endpoint table
    'Endpoint',
    'ENDPOINTS',
    'get_endpoint',
    # HTTP Client
    'ClientConfig',
    'WeeblyHttpClient',
    'DEFAULT_BASE_URL',
    'raise_for_response',
    # High-level client
    'WeeblyCloudClient',
    'create_client',
    # Configuration
    'Settings',
    'load_settings',
    'configure_logging',
]
