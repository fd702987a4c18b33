"""
Authentication resource for the GiveHub client.

Login stores the issued token pair on the session; refresh replaces the
access token. The two endpoints answer with different shapes: login nests
the tokens under ``tokens``, refresh returns ``accessToken`` at the top level.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from ..core.pipeline import RequestOptions, RequestPipeline
from ..core.session import Session
from ..exceptions import ApiError, AuthenticationError, GiveHubError
from ..models import (
    LoginRequest,
    Payload,
    RefreshRequest,
    TokenPair,
    VerifyEmailRequest,
)
from .base import BaseResource

logger = logging.getLogger(__name__)


class Auth(BaseResource):
    """
    Login, registration, email verification and token refresh.

    Examples:
        >>> client.auth.login("user@example.com", "password123")
        >>> client.session.is_authenticated
        True
    """

    def __init__(
        self,
        pipeline: RequestPipeline,
        session: Session,
        clear_tokens_on_refresh_failure: bool = False,
    ) -> None:
        """
        Initialize the Auth resource.

        Args:
            pipeline: The client's request pipeline
            session: Session whose tokens this resource manages
            clear_tokens_on_refresh_failure: Drop both tokens when a refresh
                request raises, instead of keeping the stale ones
        """
        super().__init__(pipeline)
        self._session = session
        self._clear_tokens_on_refresh_failure = clear_tokens_on_refresh_failure

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Log in and store the returned token pair.

        Args:
            email: Account email
            password: Account password

        Returns:
            The login response, unchanged

        Examples:
            >>> result = client.auth.login("user@example.com", "password123")
            >>> result["user"]["username"]
        """
        response = self._send("POST", "/auth/login", LoginRequest(email=email, password=password))

        if isinstance(response, dict) and response.get("success"):
            try:
                tokens = TokenPair.model_validate(response.get("tokens") or {})
            except PydanticValidationError as e:
                raise ApiError(f"Malformed login response: {e}", details=response) from e
            self._session.set_access_token(tokens.access_token)
            self._session.set_refresh_token(tokens.refresh_token)
            logger.info("Logged in to GiveHub")

        return response

    def register(self, user_data: Payload) -> Dict[str, Any]:
        """
        Register a new user.

        Args:
            user_data: RegisterRequest or mapping with email, password, names, ...

        Returns:
            The registration response
        """
        return self._send("POST", "/auth/register", user_data)

    def verify_email(self, email: str, code: str) -> Dict[str, Any]:
        """Confirm an email address with the code sent to it."""
        return self._send("POST", "/auth/verify", VerifyEmailRequest(email=email, code=code))

    def refresh_access_token(self) -> Dict[str, Any]:
        """
        Exchange the refresh token for a new access token.

        The refresh token itself is kept. This request never triggers
        another refresh, even when it is answered with 401.

        Returns:
            The refresh response, unchanged

        Raises:
            AuthenticationError: If no refresh token is held
            ApiError: If the refresh request fails
        """
        if not self._session.refresh_token:
            raise AuthenticationError("No refresh token available; log in first")

        options = RequestOptions(
            method="POST",
            body=RefreshRequest(refresh_token=self._session.refresh_token).to_payload(),
        )
        try:
            response = self._pipeline.execute("/auth/refresh", options, allow_refresh=False)
        except GiveHubError:
            if self._clear_tokens_on_refresh_failure:
                self._session.clear_tokens()
            raise

        if isinstance(response, dict) and response.get("success"):
            self._session.set_access_token(response.get("accessToken"))
            logger.debug("Access token refreshed")

        return response
