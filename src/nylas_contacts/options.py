"""
Client options: the credential store and transport factory shared by the resource facades.
"""
import logging
from typing import Optional

from nylas_contacts.adapters.nylas.request import Request, build_session
from nylas_contacts.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Options:
    """
    Holds the default access token and one pooled HTTP session.

    `get_request()` hands out a fresh Request builder per call so no
    builder state is shared between operations.
    """

    def __init__(self, settings: Optional[Settings] = None, access_token: Optional[str] = None):
        self.settings: Settings = settings or get_settings()
        self._access_token = access_token
        self.session = build_session(
            total_retries=self.settings.max_retries,
            verify_ssl=self.settings.verify_ssl,
        )
        logger.debug(f"Nylas client configured for {self.settings.nylas.api_base_url}")

    def get_access_token(self) -> Optional[str]:
        """Constructor override first, then NYLAS_ACCESS_TOKEN; None when neither is set."""
        if self._access_token is not None:
            return self._access_token
        secret = self.settings.nylas.access_token
        return secret.get_secret_value() if secret is not None else None

    def set_access_token(self, token: Optional[str]) -> None:
        self._access_token = token

    def get_request(self) -> Request:
        return Request(
            self.session,
            str(self.settings.nylas.api_base_url),
            timeout=self.settings.request_timeout,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Options":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
