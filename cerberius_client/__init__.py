"""
Cerberius Client Library

A Python client for the Cerberius threat-intelligence API. Requests are
signed with a timestamp-based HMAC-SHA256 signature.

Example usage:
    from cerberius_client import CerberiusClient

    client = CerberiusClient("your-api-key", "your-api-secret")
    result = client.email_lookup(["someone@example.com"])
"""

from .client import CerberiusClient
from .exceptions import (
    CerberiusClientError,
    ConfigurationError,
    HTTPStatusError,
    ApiError
)
from .signing import compute_signature, current_time_millis, generate_auth_headers
from .transport import RequestsTransport, Transport, TransportResponse
from .constants import (
    HEADER_API_KEY,
    HEADER_TIMESTAMP,
    HEADER_SIGNATURE,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "CerberiusClient",
    "CerberiusClientError",
    "ConfigurationError",
    "HTTPStatusError",
    "ApiError",
    "compute_signature",
    "current_time_millis",
    "generate_auth_headers",
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "HEADER_API_KEY",
    "HEADER_TIMESTAMP",
    "HEADER_SIGNATURE",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG"
]
