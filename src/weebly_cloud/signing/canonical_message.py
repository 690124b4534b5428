"""
Canonical message construction for Weebly Cloud request signing

The signed message is the method, the path and the body joined by single
newlines. Any deviation from the bytes actually sent, including whitespace
inside the JSON body, produces a signature the server rejects.
"""

from typing import Optional, Union

from .types import (
    EMPTY_BODY,
    HttpMethod,
    SignableRequest,
    SigningError,
    SigningErrorCodes,
)


def normalize_method(method: Union[str, HttpMethod]) -> HttpMethod:
    """
    Resolve a method token to an HttpMethod.

    The token is matched exactly; lowercase methods are rejected rather than
    upper-cased because the wire value must equal the signed value.

    Args:
        method: Method name or HttpMethod member

    Returns:
        HttpMethod: Resolved method

    Raises:
        SigningError: If the method is not supported
    """
    if isinstance(method, HttpMethod):
        return method
    try:
        return HttpMethod(method)
    except ValueError:
        raise SigningError(
            f"Unsupported HTTP method: {method!r}",
            SigningErrorCodes.INVALID_METHOD,
            {"method": method, "allowed": [m.value for m in HttpMethod]}
        )


def validate_path(path: str) -> str:
    """
    Check that a path can be placed on its own line of the canonical message.

    Raises:
        SigningError: If the path is not a string, has line breaks, a leading
            slash or a query string
    """
    if not isinstance(path, str):
        raise SigningError(
            f"Path must be a string, got {type(path).__name__}",
            SigningErrorCodes.INVALID_PATH,
            {"path": repr(path)}
        )

    if '\n' in path or '\r' in path:
        raise SigningError(
            "Path cannot contain line breaks",
            SigningErrorCodes.INVALID_PATH,
            {"path": repr(path)}
        )

    if path.startswith('/'):
        raise SigningError(
            f"Path must be relative to the API root: {path}",
            SigningErrorCodes.INVALID_PATH,
            {"path": path}
        )

    if '?' in path:
        raise SigningError(
            f"Path cannot carry a query string: {path}",
            SigningErrorCodes.INVALID_PATH,
            {"path": path}
        )

    return path


def validate_body(body: Optional[str]) -> str:
    if body is None:
        return EMPTY_BODY
    if not isinstance(body, str):
        raise SigningError(
            f"Body must be JSON text, got {type(body).__name__}",
            SigningErrorCodes.INVALID_BODY,
            {"body_type": type(body).__name__}
        )
    return body


def create_signable_request(
    method: Union[str, HttpMethod],
    path: str,
    body: Optional[str] = None
) -> SignableRequest:
    """
    Build a validated SignableRequest.

    Args:
        method: HTTP method token
        path: Path after the API root
        body: JSON text, or None for a request without payload

    Returns:
        SignableRequest: Immutable request ready for signing
    """
    return SignableRequest(
        method=normalize_method(method),
        path=validate_path(path),
        body=validate_body(body)
    )


def build_canonical_message(request: SignableRequest) -> str:
    """
    Build the canonical message for signing.

    Args:
        request: Request to sign

    Returns:
        str: "{method}\\n{path}\\n{body}" with no trailing newline
    """
    return '\n'.join((request.method.value, request.path, request.body))
