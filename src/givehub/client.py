"""
GiveHub API client.

Wires one Session, one transport and one RequestPipeline together and
exposes the API resources as attributes.
"""

import logging
from typing import Any, Optional

from .config import ClientConfig
from .core.pipeline import RequestOptions, RequestPipeline
from .core.session import Session
from .core.transport import RequestsTransport
from .resources import Auth, Campaigns, Donations, Impact, Notifications, Updates

logger = logging.getLogger(__name__)


class GiveHubClient:
    """
    Client for the GiveHub crowdfunding and impact-tracking API.

    Every client owns its own session, so tokens obtained by one client are
    never visible to another.

    Attributes:
        auth: Login, registration and token refresh
        campaigns: Campaign management and media
        donations: One-time and recurring donations
        impact: Impact metrics
        updates: Campaign progress updates
        notifications: User notifications

    Examples:
        >>> client = GiveHubClient(api_key="your-api-key")
        >>> client.auth.login("user@example.com", "password123")
        >>> campaigns = client.campaigns.list({"category": "water", "status": "active"})
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        version: Optional[str] = None,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[Any] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API host (or GIVEHUB_BASE_URL; default https://api.thegivehub.com)
            version: API version prefix (or GIVEHUB_API_VERSION; default v1)
            api_key: API key (or GIVEHUB_API_KEY)
            access_token: Pre-issued access token (or GIVEHUB_ACCESS_TOKEN)
            refresh_token: Pre-issued refresh token (or GIVEHUB_REFRESH_TOKEN)
            timeout: Request timeout in seconds (or GIVEHUB_TIMEOUT; default 30)
            config: A prepared ClientConfig; the keyword arguments above are
                ignored when this is given
            transport: Object with a ``send`` method, replacing the default
                requests-based transport

        Raises:
            ConfigurationError: If the resolved configuration is invalid
        """
        if config is None:
            config = ClientConfig.from_env(
                base_url=base_url,
                version=version,
                api_key=api_key,
                access_token=access_token,
                refresh_token=refresh_token,
                timeout=timeout,
            )
        self.config = config

        self.session = Session(
            base_url=config.base_url,
            version=config.version,
            api_key=config.api_key,
            access_token=config.access_token,
            refresh_token=config.refresh_token,
        )
        self._transport = transport or RequestsTransport(timeout=config.timeout)
        self._pipeline = RequestPipeline(self.session, self._transport)

        self.auth = Auth(
            self._pipeline,
            self.session,
            clear_tokens_on_refresh_failure=config.clear_tokens_on_refresh_failure,
        )
        self._pipeline.refresh_handler = self.auth.refresh_access_token

        self.campaigns = Campaigns(self._pipeline)
        self.donations = Donations(self._pipeline)
        self.impact = Impact(self._pipeline)
        self.updates = Updates(self._pipeline)
        self.notifications = Notifications(self._pipeline)

        logger.debug(f"Initialized GiveHubClient for {config.base_url}/{config.version}")

    def request(self, endpoint: str, options: Optional[RequestOptions] = None) -> Any:
        """
        Call an arbitrary endpoint through the request pipeline.

        Args:
            endpoint: Path starting with '/', e.g. '/campaigns/abc123'
            options: Method, body and multipart overrides

        Returns:
            The decoded JSON response

        Raises:
            TransportError: If no response was obtained
            ApiError: If the API answered with a status code >= 400
        """
        return self._pipeline.execute(endpoint, options)

    def set_access_token(self, token: str) -> None:
        """Set the access token used for the Authorization header."""
        self.session.set_access_token(token)

    def set_refresh_token(self, token: str) -> None:
        """Set the refresh token used to renew an expired access token."""
        self.session.set_refresh_token(token)

    def close(self) -> None:
        """Close the underlying transport, if it supports closing."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()
        logger.debug("GiveHubClient closed")

    def __enter__(self) -> "GiveHubClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "authenticated" if self.session.is_authenticated else "anonymous"
        return f"<GiveHubClient {self.session.base_url}/{self.session.version} status={status}>"
