"""
Request signing for the Cerberius API.

Every request carries the API key, a millisecond timestamp and an
HMAC-SHA256 signature of ``timestamp + api_key`` keyed by the API secret.
The server checks the timestamp against its replay window, so headers must
be generated fresh for each request.
"""

import hashlib
import hmac
import time
from typing import Dict, Union

from .constants import HEADER_API_KEY, HEADER_SIGNATURE, HEADER_TIMESTAMP


def current_time_millis() -> int:
    """Return the wall clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def compute_signature(api_key: str, api_secret: str, timestamp: Union[int, str]) -> str:
    """
    Compute the request signature.

    Args:
        api_key: Public API key
        api_secret: Shared API secret used as the HMAC key
        timestamp: Milliseconds since the epoch (int or decimal string)

    Returns:
        Lowercase hex-encoded HMAC-SHA256 of ``timestamp + api_key``
    """
    data_to_sign = f"{timestamp}{api_key}"
    mac = hmac.new(
        api_secret.encode('utf-8'),
        data_to_sign.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


def generate_auth_headers(api_key: str, api_secret: str, timestamp_ms: int) -> Dict[str, str]:
    """
    Build the authentication headers for a single request.

    Args:
        api_key: Public API key
        api_secret: Shared API secret
        timestamp_ms: Request time in milliseconds since the epoch

    Returns:
        Dict with the X-API-Key, X-Timestamp and X-Signature headers
    """
    timestamp = str(timestamp_ms)
    return {
        HEADER_API_KEY: api_key,
        HEADER_TIMESTAMP: timestamp,
        HEADER_SIGNATURE: compute_signature(api_key, api_secret, timestamp),
    }
