"""
Custom exceptions for the Cerberius client library.

Network failures raised by the transport (``requests.ConnectionError``,
``requests.Timeout`` and friends) are not wrapped and reach the caller as-is.
"""

from typing import Any


class CerberiusClientError(Exception):
    """Base exception for Cerberius client errors."""
    pass


class ConfigurationError(CerberiusClientError):
    """Raised when client configuration is invalid."""
    pass


class HTTPStatusError(CerberiusClientError):
    """Raised by a transport when the server answers with a non-2xx status."""

    def __init__(self, status: int, data: Any = None):
        super().__init__(f"HTTP {status}")
        self.status = status
        self.data = data


class ApiError(CerberiusClientError):
    """Raised by lookup operations when the service rejects a request."""

    def __init__(self, status_code: int, body: Any = None):
        super().__init__(f"API Error: {status_code} {body}")
        self.status_code = status_code
        self.body = body
