"""
Utility functions for request signing

This module provides encoding helpers, JSON body serialization and
header redaction used by the signer and the HTTP transport.
"""

import base64
import json
from typing import Any, Dict, Mapping, Optional

from .types import (
    EMPTY_BODY,
    PUBLIC_KEY_HEADER,
    SIGNATURE_HEADER,
)

# Headers whose values must never reach a log record in full
SENSITIVE_HEADERS = frozenset(h.lower() for h in (PUBLIC_KEY_HEADER, SIGNATURE_HEADER, 'Authorization'))


def to_hex(data: bytes) -> str:
    """
    Convert bytes to lowercase hex string.

    Args:
        data: Bytes to convert

    Returns:
        str: Lowercase hex string
    """
    return data.hex().lower()


def encode_base64(text: str) -> str:
    """Base64-encode UTF-8 text with the standard padded alphabet."""
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def serialize_body(payload: Optional[Mapping[str, Any]]) -> str:
    """
    Serialize a request payload to the exact JSON text that is signed and sent.

    Keys keep their insertion order and no whitespace is added between
    tokens. A missing payload serializes to the empty-body token.

    Args:
        payload: Mapping to serialize, or None

    Returns:
        str: Compact JSON text
    """
    if payload is None:
        return EMPTY_BODY
    return json.dumps(dict(payload), separators=(',', ':'), ensure_ascii=False)


def mask_value(value: str, visible: int = 4) -> str:
    """
    Mask all but the first few characters of a sensitive value.

    Args:
        value: Value to mask
        visible: Number of leading characters left readable

    Returns:
        str: Masked value
    """
    if not value:
        return value
    if len(value) <= visible * 2:
        return '*' * len(value)
    return value[:visible] + '...' + '*' * 4


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Return a copy of headers safe for logging.

    Args:
        headers: Request or response headers

    Returns:
        dict: Headers with credential-bearing values masked
    """
    return {
        name: mask_value(str(value)) if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }
