"""
Client for the Cerberius threat-intelligence API.

This module provides the authenticated client for the email reputation,
IP reputation and prompt-safety endpoints. Each request is signed with a
fresh timestamp-based HMAC-SHA256 signature.
"""

import os
from typing import Any, Callable, Dict, List, Optional

from .constants import (
    DEFAULT_CONFIG,
    EMAIL_LOOKUP_PATH,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_BASE_URL,
    IP_LOOKUP_PATH,
    PROMPT_CHECK_PATH
)
from .exceptions import ApiError, ConfigurationError, HTTPStatusError
from .signing import current_time_millis, generate_auth_headers
from .transport import RequestsTransport, Transport


class CerberiusClient:
    """
    Authenticated client for the Cerberius API.

    Holds the API credentials and signs every request. The HTTP layer is
    delegated to a transport, by default a RequestsTransport bound to the
    configured base URL.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        transport: Optional[Transport] = None,
        clock: Optional[Callable[[], int]] = None,
        **config
    ):
        """
        Initialize Cerberius client.

        Args:
            api_key: Public API key
            api_secret: Shared API secret used to sign requests
            transport: Optional transport; a RequestsTransport is built when omitted
            clock: Optional callable returning epoch milliseconds
            **config: Configuration options (base_url, timeout)

        Raises:
            ConfigurationError: If credentials or configuration are invalid
        """
        self._api_key = api_key
        self._api_secret = api_secret

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._clock = clock or current_time_millis
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else RequestsTransport(
            self.config['base_url'],
            timeout=self.config['timeout']
        )

    @classmethod
    def from_env(cls, **kwargs) -> 'CerberiusClient':
        """
        Create a client from CERBERIUS_API_KEY, CERBERIUS_API_SECRET and,
        when set, CERBERIUS_BASE_URL.
        """
        api_key = os.getenv(ENV_API_KEY)
        api_secret = os.getenv(ENV_API_SECRET)
        if not api_key or not api_secret:
            raise ConfigurationError(
                f"Set {ENV_API_KEY} and {ENV_API_SECRET} environment variables"
            )

        base_url = os.getenv(ENV_BASE_URL)
        if base_url and 'base_url' not in kwargs:
            kwargs['base_url'] = base_url

        return cls(api_key, api_secret, **kwargs)

    def _validate_config(self):
        """Validate client configuration."""
        if not isinstance(self._api_key, str) or not self._api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not isinstance(self._api_secret, str) or not self._api_secret:
            raise ConfigurationError("api_secret cannot be empty")

        if not self.config['base_url']:
            raise ConfigurationError("base_url cannot be empty")

        self._validate_timeout(self.config['timeout'])

    @staticmethod
    def _validate_timeout(timeout):
        """Accept None, a positive number or a (connect, read) pair, as requests does."""
        if timeout is None:
            return
        values = timeout if isinstance(timeout, tuple) else (timeout,)
        if isinstance(timeout, tuple) and len(timeout) != 2:
            raise ConfigurationError("timeout tuple must be (connect, read)")
        for value in values:
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"timeout must be a number, got {value!r}")
            if value <= 0:
                raise ConfigurationError("timeout must be positive")

    @property
    def api_key(self) -> str:
        return self._api_key

    def _generate_auth_headers(self) -> Dict[str, str]:
        """Sign a request at the current clock time."""
        return generate_auth_headers(self._api_key, self._api_secret, self._clock())

    def _post(self, path: str, body: Dict[str, Any]) -> Any:
        """
        Make an authenticated POST request.

        Args:
            path: Endpoint path (relative to base_url)
            body: JSON request body

        Returns:
            Parsed response body

        Raises:
            ApiError: If the service answers with a non-2xx status
        """
        headers = self._generate_auth_headers()
        try:
            response = self.transport.post(path, body, headers)
        except HTTPStatusError as e:
            raise ApiError(e.status, e.data) from e
        return response.data

    def email_lookup(self, emails: List[str]) -> Any:
        """Look up the reputation of a list of email addresses."""
        return self._post(EMAIL_LOOKUP_PATH, {'emails': emails})

    def ip_lookup(self, ips: List[str]) -> Any:
        """Look up the reputation of a list of IP addresses."""
        return self._post(IP_LOOKUP_PATH, {'ips': ips})

    def prompt_check(self, prompt: str) -> Any:
        """Classify a prompt for injection and other safety issues."""
        return self._post(PROMPT_CHECK_PATH, {'prompt': prompt})

    def close(self):
        """Close the transport if this client created it."""
        if self._owns_transport:
            close = getattr(self.transport, 'close', None)
            if close is not None:
                close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self):
        return f"CerberiusClient(base_url={self.config['base_url']!r})"
