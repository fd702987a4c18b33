"""API resources for the GiveHub client."""

from .auth import Auth
from .base import BaseResource
from .campaigns import Campaigns
from .donations import Donations
from .impact import Impact
from .notifications import Notifications
from .updates import Updates

__all__ = [
    "Auth",
    "BaseResource",
    "Campaigns",
    "Donations",
    "Impact",
    "Notifications",
    "Updates",
]
