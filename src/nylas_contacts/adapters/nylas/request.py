import logging
from typing import Any, Dict, Iterable, Optional
from urllib.parse import quote

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from nylas_contacts.exceptions import TransportError

logger = logging.getLogger(__name__)


def build_session(total_retries: int = 0,
                  backoff_factor: float = 1.0,
                  status_forcelist: tuple = (429, 500, 502, 503, 504),
                  verify_ssl: bool = True) -> requests.Session:
    """
    Creates a requests.Session with:
        - JSON accept header
        - HTTPAdapter retrying connection errors and the given HTTP status codes
          (`total_retries=0` means a single attempt)
        - certifi's CA bundle, or no verification when `verify_ssl` is False
    """
    session = requests.Session()

    retry_strategy = Retry(
        total=total_retries,
        connect=total_retries,
        read=total_retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=frozenset(["GET", "PUT", "DELETE"]),
        raise_on_status=False
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    session.headers.update({"Accept": "application/json"})

    if verify_ssl:
        session.verify = certifi.where()
    else:
        session.verify = False
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    return session


class Request:
    """
    Single-use request builder over a shared session.

    Setters return the builder so calls can be chained; a verb method
    (`get`, `post`, `put`, `delete`) sends the request to the endpoint
    template and returns the decoded payload.
    """

    def __init__(self, session: requests.Session, api_base_url: str, timeout: float = 10.0):
        self.session = session
        self.api_base_url = str(api_base_url).rstrip("/")
        self.timeout = timeout

        self.path: list[str] = []
        self.query: Dict[str, Any] = {}
        self.form_params: Optional[Dict[str, Any]] = None
        self.header_params: Dict[str, str] = {}

    def set_path(self, segments: Iterable[str]) -> "Request":
        self.path = [str(s) for s in segments]
        return self

    def set_query(self, params: Dict[str, Any]) -> "Request":
        self.query = dict(params)
        return self

    def set_form_params(self, params: Dict[str, Any]) -> "Request":
        self.form_params = dict(params)
        return self

    def set_header_params(self, params: Dict[str, str]) -> "Request":
        headers = dict(params)
        token = headers.get("Authorization")
        # bare access tokens are bearer tokens
        if token and " " not in token:
            headers["Authorization"] = f"Bearer {token}"
        self.header_params = headers
        return self

    def get(self, endpoint: str) -> Any:
        return self._send("GET", endpoint)

    def post(self, endpoint: str) -> Any:
        return self._send("POST", endpoint)

    def put(self, endpoint: str) -> Any:
        return self._send("PUT", endpoint)

    def delete(self, endpoint: str) -> Any:
        return self._send("DELETE", endpoint)

    def build_url(self, endpoint: str) -> str:
        segments = [quote(s, safe="") for s in self.path]
        return f"{self.api_base_url}/{endpoint.format(*segments).lstrip('/')}"

    def _send(self, method: str, endpoint: str) -> Any:
        url = self.build_url(endpoint)
        try:
            resp = self.session.request(
                method,
                url,
                params=self.query or None,
                json=self.form_params,
                headers=self.header_params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        return self._handle_response(resp)

    def _handle_response(self, resp: requests.Response) -> Any:
        """
            Handle API response with proper error checking and decoding.

            Args:
                resp: HTTP response object

            Returns:
                Parsed JSON for JSON responses, raw bytes otherwise
                (contact pictures), {} for an empty body

            Raises:
                TransportError: for 4xx/5xx status codes or invalid JSON
            """
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise TransportError(
                f"HTTP {resp.status_code} error for {resp.url}",
                status_code=resp.status_code,
                url=resp.url,
            ) from e

        if not resp.content:
            logger.debug(f"Empty response received for {resp.url}")
            return {}

        content_type = resp.headers.get("Content-Type", "")
        if "json" not in content_type:
            return resp.content

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise TransportError(
                f"Invalid JSON response: {e}",
                status_code=resp.status_code,
                url=resp.url,
            ) from e
