"""
GiveHub - Python client for the GiveHub crowdfunding and impact-tracking API.

This library provides typed access to authentication, campaigns, donations,
impact metrics, progress updates and notifications, with transparent
access-token renewal.
"""

from .client import GiveHubClient
from .config import ClientConfig
from .core.pipeline import RequestOptions
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    GiveHubError,
    TransportError,
    ValidationError,
)
from .workflows import CampaignManager, DonationProcessor, ImpactTracker

__version__ = "1.0.0"

__all__ = [
    # Client
    "GiveHubClient",
    "ClientConfig",
    "RequestOptions",
    # Workflows
    "CampaignManager",
    "DonationProcessor",
    "ImpactTracker",
    # Exceptions
    "GiveHubError",
    "ApiError",
    "TransportError",
    "AuthenticationError",
    "ConfigurationError",
    "ValidationError",
]
