"""
Exception classes for Weebly Cloud Python SDK
"""

from typing import Optional, Dict, Any


class WeeblyCloudError(Exception):
    """Base exception for all Weebly Cloud SDK errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(WeeblyCloudError):
    """Exception raised for invalid local input"""

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConfigurationError(WeeblyCloudError):
    """Exception raised when client settings cannot be loaded"""

    def __init__(self, message: str, error_code: str = "CONFIG_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class TransportError(WeeblyCloudError):
    """Exception raised when a request never produced a response"""

    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConnectionFailedError(TransportError):
    """Exception raised for DNS, TCP or TLS failures"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONNECTION_FAILED", details)


class RequestTimeoutError(TransportError):
    """Exception raised when the server did not answer in time"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "REQUEST_TIMEOUT", details)


class ApiResponseError(WeeblyCloudError):
    """Exception raised when the remote service rejected a request"""

    def __init__(self, message: str, http_status: int = 0, response: Any = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "API_ERROR", details)
        self.http_status = http_status
        self.response = response
