"""
Configuration management for the GiveHub client.

This module provides the ClientConfig model. Values are resolved from
explicit arguments first, then ``GIVEHUB_*`` environment variables, then
built-in defaults.
"""

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from .core.credentials import ENV_PREFIX, CredentialManager
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.thegivehub.com"
DEFAULT_VERSION = "v1"
DEFAULT_TIMEOUT = 30.0

# Non-secret settings and the environment variables that override them
_ENV_SETTINGS = {
    "base_url": "BASE_URL",
    "version": "API_VERSION",
    "timeout": "TIMEOUT",
    "clear_tokens_on_refresh_failure": "CLEAR_TOKENS_ON_REFRESH_FAILURE",
}

# Only these are converted from strings; the rest pass through unchanged
_TYPED_SETTINGS = ("timeout", "clear_tokens_on_refresh_failure")


class ClientConfig(BaseModel):
    """
    Settings used to construct a GiveHubClient.

    Examples:
        >>> config = ClientConfig.from_env(api_key="your-api-key")
        >>> config.base_url
        'https://api.thegivehub.com'
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_VERSION
    api_key: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    clear_tokens_on_refresh_failure: bool = False

    @field_validator("base_url", "version")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """
        Build a config from arguments, environment variables and defaults.

        Arguments passed as None are treated as not given.

        Args:
            **overrides: Any ClientConfig field

        Returns:
            The resolved ClientConfig

        Raises:
            ConfigurationError: If an unknown field is given or a value is invalid

        Examples:
            >>> config = ClientConfig.from_env(version="v2")
        """
        unknown = set(overrides) - set(cls.model_fields)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration option(s): {', '.join(sorted(unknown))}"
            )

        values: Dict[str, Any] = {}
        for field, env_name in _ENV_SETTINGS.items():
            env_value = os.getenv(f"{ENV_PREFIX}{env_name}")
            if env_value is not None:
                values[field] = (
                    _convert_value(env_value) if field in _TYPED_SETTINGS else env_value
                )
                logger.debug(f"Applied env override: {ENV_PREFIX}{env_name}")

        credentials = CredentialManager()
        for field, getter in (
            ("api_key", credentials.get_api_key),
            ("access_token", credentials.get_access_token),
            ("refresh_token", credentials.get_refresh_token),
        ):
            secret = getter()
            if secret is not None:
                values[field] = secret

        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid GiveHub configuration: {e}") from e


def _convert_value(value: str) -> Any:
    """
    Convert an environment string to bool or number where it looks like one.

    Args:
        value: Raw environment value

    Returns:
        Converted value, or the original string
    """
    value_lower = value.strip().lower()
    if value_lower in ("true", "yes"):
        return True
    if value_lower in ("false", "no"):
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value
