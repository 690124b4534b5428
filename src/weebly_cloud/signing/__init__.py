"""
Weebly Cloud Python SDK - Request Signing Module

HMAC-SHA256 request signatures for the Weebly Cloud API. Every request is
authenticated by the X-Public-Key and X-Signed-Request-Hash headers.
"""

from .types import (
    EMPTY_BODY,
    PUBLIC_KEY_HEADER,
    SIGNATURE_HEADER,
    HttpMethod,
    Credentials,
    SignableRequest,
    SignatureResult,
    SigningError,
    SigningErrorCodes,
)

from .canonical_message import (
    build_canonical_message,
    create_signable_request,
    normalize_method,
    validate_path,
)

from .hmac_signer import (
    HmacSigner,
    compute_signature,
    create_signer,
    sign,
    sign_request,
)

from .utils import (
    to_hex,
    encode_base64,
    serialize_body,
    mask_value,
    redact_headers,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'HmacSigner',
    'compute_signature',
    'create_signer',
    'sign',
    'sign_request',
    # Types
    'EMPTY_BODY',
    'PUBLIC_KEY_HEADER',
    'SIGNATURE_HEADER',
    'HttpMethod',
    'Credentials',
    'SignableRequest',
    'SignatureResult',
    'SigningError',
    'SigningErrorCodes',
    # Canonical message
    'build_canonical_message',
    'create_signable_request',
    'normalize_method',
    'validate_path',
    # Utilities
    'to_hex',
    'encode_base64',
    'serialize_body',
    'mask_value',
    'redact_headers',
]
