"""
Type definitions for request signing functionality

This module provides type definitions and data classes for the Weebly Cloud
HMAC request signing scheme.
"""

from typing import Dict, Optional, Any
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import ValidationError


# Body token signed when a request carries no payload
EMPTY_BODY = "[]"

PUBLIC_KEY_HEADER = "X-Public-Key"
SIGNATURE_HEADER = "X-Signed-Request-Hash"


class HttpMethod(str, Enum):
    """HTTP methods accepted by the Weebly Cloud API"""
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Credentials:
    """
    API credentials issued for a Weebly Cloud account

    Attributes:
        public_key: API key sent with every request
        secret: Shared secret used as the HMAC key, never transmitted
    """
    public_key: str
    secret: str = field(repr=False)

    def __post_init__(self):
        """Validate credentials"""
        if not isinstance(self.public_key, str) or not self.public_key:
            raise ValidationError("API public key cannot be empty")

        if not isinstance(self.secret, str) or not self.secret:
            raise ValidationError("API secret cannot be empty")


@dataclass(frozen=True)
class SignableRequest:
    """
    Request to be signed

    Attributes:
        method: HTTP method (GET, POST, etc.)
        path: Path after the API root, without leading slash or query
        body: Exact JSON text that will be sent, or "[]" when there is none
    """
    method: HttpMethod
    path: str
    body: str = EMPTY_BODY

    @property
    def has_payload(self) -> bool:
        """True when the body is transmitted on the wire."""
        return self.body != EMPTY_BODY


@dataclass(frozen=True)
class SignatureResult:
    """
    Generated signature for a request

    Attributes:
        signature: Value of the X-Signed-Request-Hash header
        canonical_message: Message that was signed
        headers: Authentication headers to add to the request
    """
    signature: str
    canonical_message: str
    headers: Dict[str, str]


class SigningError(Exception):
    """
    Error class for signing operations

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.code}, details: {self.details})"
        return f"{self.message} (code: {self.code})"

    def __repr__(self) -> str:
        return f"SigningError(message='{self.message}', code='{self.code}', details={self.details})"


class SigningErrorCodes:
    """Standard error codes for signing operations"""

    INVALID_METHOD = "INVALID_METHOD"
    INVALID_PATH = "INVALID_PATH"
    INVALID_BODY = "INVALID_BODY"
    SIGNING_FAILED = "SIGNING_FAILED"
