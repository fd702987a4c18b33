"""Notification resource for the GiveHub client."""

from typing import Any, Dict, Mapping, Optional

from .base import BaseResource


class Notifications(BaseResource):
    """
    Notifications for the logged-in user.

    Examples:
        >>> unread = client.notifications.get_notifications({"status": "unread"})
        >>> client.notifications.mark_as_read("notification-id")
    """

    def get_notifications(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Fetch notifications, e.g. ``{"status": "unread"}``."""
        return self._get("/notifications", params or {})

    def mark_as_read(self, notification_id: str) -> Dict[str, Any]:
        """Mark a notification as read."""
        return self._send("PUT", f"/notifications/{notification_id}/read")
