"""
HTTP transport used by the Cerberius client.

A transport sends one JSON POST and returns the parsed body. Non-2xx
responses raise HTTPStatusError; anything that fails before a response
arrives is raised unchanged.
"""

import logging
from typing import Any, Dict, NamedTuple, Optional, Protocol, Tuple, Union
from urllib.parse import urljoin

import requests

from .exceptions import HTTPStatusError

logger = logging.getLogger(__name__)


class TransportResponse(NamedTuple):
    """Successful response from a transport."""
    status: int
    data: Any


class Transport(Protocol):
    """Minimal interface the client needs from an HTTP layer."""

    def post(self, path: str, json_body: Dict[str, Any], headers: Dict[str, str]) -> TransportResponse:
        ...


class RequestsTransport:
    """
    Transport backed by a requests.Session.

    Performs a single attempt per call; retries and pooling policy are left
    to the session the caller passes in.
    """

    def __init__(self, base_url: str, timeout: Union[None, float, Tuple[float, float]] = 30, session: Optional[requests.Session] = None):
        """
        Initialize transport.

        Args:
            base_url: Base URL every path is joined onto
            timeout: Request timeout in seconds, a (connect, read) pair, or None
            session: Optional existing session to use (not closed by close())
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def _build_url(self, path: str) -> str:
        return urljoin(self.base_url + '/', path.lstrip('/'))

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        """Decode a response body as JSON, falling back to text."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def post(self, path: str, json_body: Dict[str, Any], headers: Dict[str, str]) -> TransportResponse:
        """
        Send a JSON POST request.

        Args:
            path: URL path (relative to base_url)
            json_body: JSON-serializable request body
            headers: Request headers

        Returns:
            TransportResponse with the status code and parsed body

        Raises:
            HTTPStatusError: If the server answers with a non-2xx status
            requests.RequestException: If no response was received
        """
        url = self._build_url(path)
        logger.debug("POST %s", url)

        response = self.session.post(url, json=json_body, headers=headers, timeout=self.timeout)
        data = self._parse_body(response)

        logger.debug("POST %s -> %s", url, response.status_code)
        if not 200 <= response.status_code < 300:
            # empty error bodies are reported as "" rather than None
            raise HTTPStatusError(response.status_code, data if response.content else response.text)

        return TransportResponse(response.status_code, data)

    def close(self):
        """Close HTTP session if this transport created it."""
        if self._owns_session and self.session:
            self.session.close()
