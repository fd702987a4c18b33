"""Campaign resource for the GiveHub client."""

from typing import Any, Dict, Mapping, Optional

from ..models import Payload
from .base import BaseResource


class Campaigns(BaseResource):
    """
    Create, read, list and update campaigns, and attach media.

    Examples:
        >>> campaign = client.campaigns.create({
        ...     "title": "Clean Water Project",
        ...     "targetAmount": 50000,
        ...     "category": "water",
        ... })
        >>> client.campaigns.upload_media(campaign["id"], "/path/to/photo.jpg")
    """

    def create(self, campaign_data: Payload) -> Dict[str, Any]:
        """
        Create a campaign.

        Args:
            campaign_data: CampaignCreate or mapping with title, description,
                targetAmount, category, milestones, ...

        Returns:
            The created campaign
        """
        return self._send("POST", "/campaigns", campaign_data)

    def get(self, campaign_id: str) -> Dict[str, Any]:
        """Fetch a single campaign."""
        return self._get(f"/campaigns/{campaign_id}")

    def list(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        List campaigns.

        Args:
            params: Filters such as category, status, page, limit

        Examples:
            >>> client.campaigns.list({"category": "water", "status": "active"})
        """
        return self._get("/campaigns", params or {})

    def update(self, campaign_id: str, update_data: Payload) -> Dict[str, Any]:
        """Update a campaign with the given fields."""
        return self._send("PUT", f"/campaigns/{campaign_id}", update_data)

    def upload_media(self, campaign_id: str, file_path: str) -> Dict[str, Any]:
        """
        Upload an image or video for a campaign.

        Args:
            campaign_id: The campaign ID
            file_path: Local path of the file to upload

        Returns:
            The upload response
        """
        return self._upload(f"/campaigns/{campaign_id}/media", file_path)
