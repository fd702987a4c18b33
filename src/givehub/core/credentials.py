"""
Credential management for the GiveHub client.

Secrets (API key and tokens) are read from ``GIVEHUB_*`` environment
variables. A local ``.env`` file is loaded once, so development setups work
without exporting variables by hand.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GIVEHUB_"

_env_loaded = False


def _ensure_env_loaded() -> None:
    global _env_loaded
    if not _env_loaded:
        # Existing environment variables win over .env entries
        load_dotenv(override=False)
        _env_loaded = True
        logger.debug("Environment variables loaded")


class CredentialManager:
    """
    Reads GiveHub credentials from the environment.

    Unlike a session, the manager holds no token state of its own: every call
    reads the environment, so separate clients never share credentials through
    it.

    Examples:
        >>> manager = CredentialManager()
        >>> api_key = manager.get_api_key()
    """

    def __init__(self, prefix: str = ENV_PREFIX) -> None:
        """
        Initialize the credential manager.

        Args:
            prefix: Prefix prepended to every credential name
        """
        self._prefix = prefix
        _ensure_env_loaded()

    def get_credential(self, name: str, required: bool = False) -> Optional[str]:
        """
        Get a credential by name using the ``{PREFIX}{NAME}`` pattern.

        Args:
            name: The credential name (e.g., 'API_KEY')
            required: Whether the credential is required

        Returns:
            The credential value, or None when missing and not required

        Raises:
            ConfigurationError: If a required credential is missing
        """
        env_var_name = f"{self._prefix}{name}"
        credential = os.getenv(env_var_name)

        if not credential:
            if required:
                raise ConfigurationError(
                    f"Required credential not found: {env_var_name}\n"
                    f"Please set the environment variable {env_var_name} "
                    f"or add it to your .env file."
                )
            logger.debug(f"Optional credential not found: {name}")
            return None

        logger.debug(f"Loaded credential: {name}")
        return credential

    def get_api_key(self) -> Optional[str]:
        """Return the GiveHub API key, if configured."""
        return self.get_credential("API_KEY")

    def get_access_token(self) -> Optional[str]:
        """Return a pre-issued access token, if configured."""
        return self.get_credential("ACCESS_TOKEN")

    def get_refresh_token(self) -> Optional[str]:
        """Return a pre-issued refresh token, if configured."""
        return self.get_credential("REFRESH_TOKEN")

    def has_credential(self, name: str) -> bool:
        """
        Check if a credential exists without raising an error.

        Args:
            name: The credential name to check

        Returns:
            True if the credential exists, False otherwise
        """
        return self.get_credential(name) is not None
