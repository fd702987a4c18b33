"""
Session state for a single GiveHub client.

The session owns the connection settings and the current token pair. It is
created by the client and shared by reference with the request pipeline and
the Auth resource; nothing is stored at module or class level.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class Session:
    """
    Connection settings and tokens for one client instance.

    Attributes:
        base_url: API host, e.g. 'https://api.thegivehub.com'
        version: Version prefix inserted before every endpoint path
        api_key: Value of the X-API-Key header
        access_token: Bearer token, if authenticated
        refresh_token: Token used to obtain a new access token
    """

    def __init__(
        self,
        base_url: str,
        version: str,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> None:
        self.base_url = base_url
        self.version = version
        self.api_key = api_key
        self.access_token = access_token
        self.refresh_token = refresh_token

    def set_access_token(self, token: Optional[str]) -> None:
        """Replace the current access token."""
        self.access_token = token
        logger.debug("Access token replaced")

    def set_refresh_token(self, token: Optional[str]) -> None:
        """Replace the current refresh token."""
        self.refresh_token = token
        logger.debug("Refresh token replaced")

    def clear_tokens(self) -> None:
        """Drop both tokens, returning the session to the anonymous state."""
        self.access_token = None
        self.refresh_token = None
        logger.debug("Session tokens cleared")

    @property
    def is_authenticated(self) -> bool:
        """True when an access token is held."""
        return bool(self.access_token)

    def build_url(self, endpoint: str) -> str:
        """
        Build the full URL for an endpoint path.

        No slash normalization is done; ``endpoint`` must start with '/'.
        """
        return f"{self.base_url}/{self.version}{endpoint}"

    def __repr__(self) -> str:
        status = "authenticated" if self.is_authenticated else "anonymous"
        return f"<Session {self.base_url}/{self.version} status={status}>"
