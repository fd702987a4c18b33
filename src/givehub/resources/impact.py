"""Impact metrics resource for the GiveHub client."""

from typing import Any, Dict, Mapping, Optional

from ..models import Payload, to_payload
from .base import BaseResource


class Impact(BaseResource):
    """
    Impact metrics reported against a campaign.

    Examples:
        >>> client.impact.create_metrics("campaign-id", {
        ...     "metrics": [{"name": "People Helped", "value": 500, "unit": "individuals"}],
        ... })
        >>> client.impact.get_metrics("campaign-id", {"from": "2024-01-01", "to": "2024-12-31"})
    """

    def create_metrics(self, campaign_id: str, metrics_data: Payload) -> Dict[str, Any]:
        """
        Create metrics for a campaign.

        The campaign ID is sent first in the body, followed by the fields of
        ``metrics_data``.
        """
        body = {"campaignId": campaign_id}
        body.update(to_payload(metrics_data))
        return self._send("POST", "/impact/metrics", body)

    def update_metrics(self, metric_id: str, update_data: Payload) -> Dict[str, Any]:
        """Update an existing metrics record."""
        return self._send("PUT", f"/impact/metrics/{metric_id}", update_data)

    def get_metrics(
        self, campaign_id: str, params: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Fetch the metrics of a campaign, optionally filtered by date range."""
        return self._get(f"/impact/metrics/{campaign_id}", params or {})
