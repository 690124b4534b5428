"""
HMAC-SHA256 request signer for the Weebly Cloud API

The server authenticates each request by recomputing an HMAC over the
canonical message with the account secret. The digest is rendered as
lowercase hex text and that text, not the raw digest, is Base64-encoded.
"""

from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from .types import (
    Credentials,
    HttpMethod,
    SignableRequest,
    SignatureResult,
    SigningError,
    SigningErrorCodes,
    PUBLIC_KEY_HEADER,
    SIGNATURE_HEADER,
)
from .utils import to_hex, encode_base64
from .canonical_message import build_canonical_message, create_signable_request


def compute_signature(secret: str, canonical_message: str) -> str:
    """
    Compute the request signature over a canonical message.

    Args:
        secret: Account secret used as HMAC key
        canonical_message: Message built by build_canonical_message

    Returns:
        str: Base64 of the hex HMAC-SHA256 digest

    Raises:
        SigningError: If the digest cannot be computed
    """
    try:
        mac = crypto_hmac.HMAC(secret.encode('utf-8'), hashes.SHA256())
        mac.update(canonical_message.encode('utf-8'))
        digest_hex = to_hex(mac.finalize())
    except (TypeError, ValueError, AttributeError) as e:
        raise SigningError(
            f"Message signing failed: {e}",
            SigningErrorCodes.SIGNING_FAILED,
            {"original_error": str(e)}
        )
    return encode_base64(digest_hex)


class HmacSigner:
    """
    Signer bound to one set of API credentials.

    Holds no mutable state; a single instance can sign requests from
    several threads at once.
    """

    def __init__(self, credentials: Credentials):
        if not isinstance(credentials, Credentials):
            raise SigningError(
                "credentials must be a Credentials instance",
                SigningErrorCodes.SIGNING_FAILED
            )
        self.credentials = credentials

    def sign(
        self,
        method: Union[str, HttpMethod],
        path: str,
        body: Optional[str] = None
    ) -> str:
        """
        Sign a request given as method, path and body.

        Args:
            method: HTTP method token (GET, POST, PATCH, PUT, DELETE)
            path: Path after the API root
            body: Exact JSON text to be sent, or None for "[]"

        Returns:
            str: Value for the X-Signed-Request-Hash header
        """
        return self.sign_request(create_signable_request(method, path, body)).signature

    def sign_request(self, request: SignableRequest) -> SignatureResult:
        """
        Sign a prepared request.

        Args:
            request: Request to sign

        Returns:
            SignatureResult: Signature, canonical message and auth headers
        """
        canonical_message = build_canonical_message(request)
        signature = compute_signature(self.credentials.secret, canonical_message)
        return SignatureResult(
            signature=signature,
            canonical_message=canonical_message,
            headers={
                PUBLIC_KEY_HEADER: self.credentials.public_key,
                SIGNATURE_HEADER: signature,
            }
        )


def create_signer(credentials: Credentials) -> HmacSigner:
    """
    Create a new HMAC signer.

    Args:
        credentials: API credentials

    Returns:
        HmacSigner: Configured signer instance
    """
    return HmacSigner(credentials)


def sign(
    method: Union[str, HttpMethod],
    path: str,
    body: Optional[str],
    secret: str
) -> str:
    """
    Sign a request with a bare secret.

    Args:
        method: HTTP method token
        path: Path after the API root
        body: JSON text, or None for a request without payload
        secret: Account secret

    Returns:
        str: Signature text
    """
    request = create_signable_request(method, path, body)
    return compute_signature(secret, build_canonical_message(request))


def sign_request(request: SignableRequest, credentials: Credentials) -> SignatureResult:
    """
    Sign a request with the given credentials.

    Args:
        request: Request to sign
        credentials: API credentials

    Returns:
        SignatureResult: Signing result
    """
    return create_signer(credentials).sign_request(request)
