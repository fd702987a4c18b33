"""Campaign progress update resource for the GiveHub client."""

from typing import Any, Dict, Mapping, Optional

from ..models import Payload
from .base import BaseResource


class Updates(BaseResource):
    """
    Progress updates posted on campaigns.

    Examples:
        >>> update = client.updates.create({
        ...     "campaignId": "campaign-id",
        ...     "title": "Construction Progress",
        ...     "content": "We have completed the first phase.",
        ...     "type": "milestone",
        ... })
        >>> client.updates.upload_media(update["id"], "/path/to/progress-photo.jpg")
    """

    def create(self, update_data: Payload) -> Dict[str, Any]:
        """Post a campaign update."""
        return self._send("POST", "/updates", update_data)

    def get_updates(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Fetch updates, e.g. filtered by campaignId and type."""
        return self._get("/updates", params or {})

    def upload_media(self, update_id: str, file_path: str) -> Dict[str, Any]:
        """Attach a media file to an update."""
        return self._upload(f"/updates/{update_id}/media", file_path)
