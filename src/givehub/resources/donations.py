"""Donation resource for the GiveHub client."""

from typing import Any, Dict, Mapping, Optional

from ..models import Payload
from .base import BaseResource


class Donations(BaseResource):
    """
    One-time and recurring donations.

    Examples:
        >>> client.donations.create({
        ...     "campaignId": "campaign-id",
        ...     "amount": {"value": 100, "currency": "USD"},
        ...     "type": "one-time",
        ... })
    """

    def create(self, donation_data: Payload) -> Dict[str, Any]:
        """Create a one-time donation."""
        return self._send("POST", "/donations", donation_data)

    def get_donations(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Fetch donation history.

        Args:
            params: Filters such as campaignId and status, sent in the given order

        Examples:
            >>> client.donations.get_donations({"campaignId": "c1", "status": "completed"})
        """
        return self._get("/donations", params or {})

    def create_recurring(self, donation_data: Payload) -> Dict[str, Any]:
        """Set up a recurring donation."""
        return self._send("POST", "/donations/recurring", donation_data)

    def cancel_recurring(self, subscription_id: str) -> Dict[str, Any]:
        """Cancel a recurring donation subscription."""
        return self._send("DELETE", f"/donations/recurring/{subscription_id}")
