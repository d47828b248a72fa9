"""
Minimal Splynx REST API (v2.0) client using HTTP Basic authentication.

Usage:
    from splynx_geo.splynx.client import get_splynx_client

    client = get_splynx_client()
    customers = client.get("admin/customers/customer", {"main_attributes[status]": "active"})
"""

import logging
from typing import Any, Optional

import requests
from requests.auth import HTTPBasicAuth

from splynx_geo.core.config import settings

logger = logging.getLogger(__name__)


class SplynxApiError(Exception):
    """Raised when the Splynx API cannot be used (bad config or a required call failed)."""
    pass


class SplynxClient:
    """
    Thin wrapper over `requests.Session` for the Splynx API.

    GET succeeds only on HTTP 200 and PUT only on HTTP 202 (the status Splynx
    returns for accepted updates). Failures are logged with the URL and status
    and reported as None/False rather than raised.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = HTTPBasicAuth(api_key, api_secret)
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": settings.SPLYNX_USER_AGENT,
        })

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[dict] = None) -> Optional[Any]:
        """
        GET a resource.

        Args:
            path: API path relative to the base URL
            params: Optional query parameters

        Returns:
            Decoded JSON body, or None on any failure
        """
        url = self.url(path)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"API GET request to {url} failed: {e}")
            return None

        if response.status_code != 200:
            logger.error(
                f"API GET request to {url} failed with HTTP code {response.status_code}: "
                f"{response.text or 'No response body'}"
            )
            return None

        try:
            return response.json()
        except ValueError:
            logger.error(f"API GET request to {url} returned malformed JSON")
            return None

    def put(self, path: str, data: dict) -> bool:
        """
        PUT a JSON body to a resource.

        Args:
            path: API path relative to the base URL
            data: Body to send as JSON

        Returns:
            True if Splynx accepted the update (HTTP 202)
        """
        url = self.url(path)
        try:
            response = self.session.put(url, json=data, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"API PUT request to {url} failed: {e}")
            return False

        if response.status_code != 202:
            logger.error(
                f"API PUT request to {url} failed with HTTP code {response.status_code}: "
                f"{response.text or 'No response body'}"
            )
            return False

        return True


def get_splynx_client(
    base_url: Optional[str] = None,
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
) -> SplynxClient:
    """
    Create a Splynx client from settings.

    Raises:
        SplynxApiError: If credentials are missing
    """
    base_url = base_url or settings.SPLYNX_BASE_URL
    api_key = api_key or settings.SPLYNX_API_KEY
    api_secret = api_secret or settings.SPLYNX_API_SECRET

    if not base_url or not api_key or not api_secret:
        raise SplynxApiError(
            "Splynx credentials not configured. "
            "Set SPLYNX_BASE_URL, SPLYNX_API_KEY and SPLYNX_API_SECRET environment variables."
        )

    return SplynxClient(base_url, api_key, api_secret, timeout=settings.REQUEST_TIMEOUT)
