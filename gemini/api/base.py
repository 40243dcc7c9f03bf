"""
HTTP transport for Gemini REST API.

Pooled requests session with timeouts. No retries, no rate limiting, no
deduplication: each call is sent exactly once.
"""

import requests
from requests.adapters import HTTPAdapter
from typing import Optional, Any, Dict
from urllib.parse import urlencode
import logging

from .classifier import ResponseClassifier
from ..config import GeminiSettings, RATE_LIMIT_STATUS_CODE
from ..exceptions import TransportError

logger = logging.getLogger(__name__)


def build_url(base_url: str, api_version: str, path: str,
              params: Optional[Dict[str, Any]] = None) -> str:
    """
    Build versioned endpoint URL.

    Args:
        base_url: API base URL
        api_version: Version number ("1")
        path: Endpoint path ("book/btcusd")
        params: Optional query parameters (None values skipped)

    Returns:
        Full URL
    """
    url = f"{base_url.rstrip('/')}/v{api_version}/{path.lstrip('/')}"
    if params:
        query = {k: v for k, v in params.items() if v is not None}
        if query:
            url += "?" + urlencode(query)
    return url


class Transport:
    """
    Sends HTTP requests and returns raw bodies.

    Thread-safe for concurrent use across accounts.
    """

    def __init__(self, settings: GeminiSettings, session: Optional[requests.Session] = None):
        """
        Initialize transport.

        Args:
            settings: Client settings
            session: Optional preconfigured requests session
        """
        self.settings = settings

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=settings.pool_connections,
                pool_maxsize=settings.pool_maxsize,
                max_retries=0,  # No automatic retries
                pool_block=False
            )
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            session.headers.update({
                "Content-Type": "text/plain",
                "Accept": "application/json",
                "Content-Length": "0",
                "Cache-Control": "no-cache",
            })
        self.session = session

        self.timeout = (settings.connect_timeout, settings.request_timeout)
        self._classifier = ResponseClassifier()

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: str = ""
    ) -> bytes:
        """
        Send request and return the raw body.

        Bodies of non-2xx responses are returned only when they hold a venue
        error envelope, so the error reaches the classifier.

        Args:
            method: HTTP method
            url: Full URL
            headers: Additional headers
            data: Request body

        Returns:
            Raw response body

        Raises:
            TransportError: On connection failure, timeout, or non-2xx response
                without an error envelope
        """
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                data=data,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout: {method} {url}")
            raise TransportError(f"Request timeout: {e}")
        except requests.exceptions.RequestException as e:
            logger.error(f"Connection error: {method} {url}")
            raise TransportError(f"Connection error: {e}")

        if response.status_code == RATE_LIMIT_STATUS_CODE:
            logger.warning(f"Rate limited: {method} {url}")

        if response.status_code >= 400:
            captured = self._classifier.probe(response.content)
            if captured is None or not captured.is_error:
                raise TransportError(
                    f"{method} {url} failed with {response.status_code}: {response.text[:200]}",
                    status_code=response.status_code
                )
            logger.debug(f"{method} {url} returned {response.status_code} with error envelope")

        return response.content

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> bytes:
        """Send GET request."""
        return self.send("GET", url, headers=headers)

    def close(self) -> None:
        """Close session and cleanup resources."""
        self.session.close()
        logger.info("Transport session closed")
