"""
Request dispatcher for the node API.

Single point where requests are built, authenticated, sent, and where
failures are normalized into ApiError / TransportError.
"""

import logging
import warnings
from typing import Any, Optional

import requests
from urllib3.exceptions import InsecureRequestWarning

from upguard_cli.upguardapi.security import SecurityContext, TLSAdapter
from upguard_cli.utils.constants import JSON_SUFFIX
from upguard_cli.utils.exceptions import ApiError, TransportError, UsageError
from upguard_cli.utils.models import Credential


def ensure_json_suffix(full_url: str) -> str:
    """Append the .json resource suffix to a URL's path if it is missing.

    The URL is split on the first '?'; the suffix is added to the path
    portion and the original query string is reattached. URLs whose path
    already ends in .json are returned unchanged.

    Args:
        full_url: Fully-qualified URL, optionally with a query string

    Returns:
        URL whose path ends in .json
    """
    path, separator, query = full_url.partition('?')
    if not path.endswith(JSON_SUFFIX):
        path = f"{path}{JSON_SUFFIX}"
    return f"{path}{separator}{query}"


def extract_error_message(response) -> str:
    """Pull the server's error message out of a failed response.

    Uses the 'error' field of a JSON object body. Falls back to the raw body
    text, then the HTTP reason phrase, then a generic 'HTTP <status>'.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get('error'):
        return str(body['error'])

    text = (response.text or '').strip()
    if text:
        return text
    return response.reason or f"HTTP {response.status_code}"


class Dispatcher:
    """
    Dispatcher for authenticated node API requests.

    Each Dispatcher owns a requests.Session and a SecurityContext; the
    context is reapplied to the session before every request. last_status
    holds the HTTP status of the most recent response (None until one arrives).
    """

    def __init__(self, credential: Credential, security: Optional[SecurityContext] = None, session=None):
        """
        Initialize Dispatcher instance.

        Args:
            credential: API credential (base URL, API key, secret key)
            security: Transport security policy (default: validate certificates, TLS 1.2+)
            session: Optional requests.Session to use (a new one is created otherwise)
        """
        self.credential = credential
        self.security = security or SecurityContext()
        self.session = session or requests.Session()
        self._adapter = None
        self.last_status = None

    @property
    def base_url(self) -> str:
        return self.credential.base_url

    def url_for(self, path: str) -> str:
        """Build the absolute URL for a path relative to the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict:
        return {
            'Authorization': self.credential.authorization,
            'Accept': 'application/json',
        }

    def _apply_security_context(self):
        """Mount an HTTPS adapter matching the current security policy."""
        if self._adapter is None or self._adapter.policy != self.security.policy_key():
            if self._adapter is not None:
                # Release the pools built for the previous policy
                self._adapter.close()
            self._adapter = TLSAdapter(self.security)
            logging.debug("Mounted TLS adapter (minimum version: %s, verify certificates: %s)",
                          self.security.minimum_tls_version.name, self.security.verify_certificates)
        self.session.mount('https://', self._adapter)

    def _resolve_url(self, path: Optional[str], full_url: Optional[str]) -> str:
        if path is None and full_url is None:
            raise UsageError("Either a relative path or a full URL must be supplied")
        if path is not None and full_url is not None:
            raise UsageError("Only one of a relative path or a full URL may be supplied")
        if full_url is not None:
            return ensure_json_suffix(full_url)
        return self.url_for(path)

    def _send(self, method: str, url: str):
        verify = self.security.verify_certificates
        with warnings.catch_warnings():
            if not verify:
                warnings.simplefilter('ignore', InsecureRequestWarning)
            return self.session.request(method, url, headers=self._headers(), verify=verify)

    def dispatch(self, path: Optional[str] = None, full_url: Optional[str] = None, method: str = 'GET') -> Any:
        """
        Send one authenticated request and return the decoded JSON body.

        Args:
            path: Path relative to the base URL (mutually exclusive with full_url)
            full_url: Fully-qualified URL; '.json' is appended to its path if missing
            method: HTTP method (default: GET)

        Returns:
            Decoded JSON body (list or dict)

        Raises:
            UsageError: If neither or both of path and full_url are supplied
            ApiError: If the server returns a non-success status
            TransportError: If no HTTP response was received
        """
        url = self._resolve_url(path, full_url)
        self._apply_security_context()

        logging.debug("%s %s", method, url)
        self.last_status = None
        try:
            response = self._send(method, url)
        except requests.exceptions.RequestException as e:
            logging.error("Transport failure for %s %s: %s", method, url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

        self.last_status = response.status_code

        if not response.ok:
            message = extract_error_message(response)
            logging.error("API request failed. Status: %s, Error: %s", response.status_code, message)
            raise ApiError(response.status_code, message)

        try:
            return response.json()
        except ValueError as e:
            logging.error("Response from %s is not valid JSON", url)
            raise ApiError(response.status_code, "Response body is not valid JSON") from e
