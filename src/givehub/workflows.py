"""
Multi-step workflows built on top of GiveHubClient.

These helpers combine several API calls into common tasks: setting up a
campaign with media and metrics, posting progress, processing donations and
keeping impact metrics current. Unlike the resources, they validate their
input before calling the API.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .client import GiveHubClient
from .exceptions import GiveHubError, ValidationError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class CampaignManager:
    """
    Campaign setup and progress reporting.

    Examples:
        >>> manager = CampaignManager(client)
        >>> campaign = manager.create_campaign_with_milestones(
        ...     {"title": "Clean Water Initiative", "description": "...",
        ...      "targetAmount": 100000, "category": "water",
        ...      "mediaPath": "/path/to/image.jpg"},
        ...     [{"description": "Initial Survey", "amount": 10000}],
        ... )
    """

    def __init__(self, client: GiveHubClient) -> None:
        self._client = client

    def create_campaign_with_milestones(
        self, campaign_data: Mapping[str, Any], milestones: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Create a campaign, then upload its media and initial metrics if given.

        Args:
            campaign_data: title, description, targetAmount, category, and
                optionally mediaPath and metrics
            milestones: Milestone dicts with description and amount

        Returns:
            The created campaign

        Raises:
            ApiError: If any of the API calls fail
        """
        try:
            campaign = self._client.campaigns.create(
                {
                    "title": campaign_data.get("title"),
                    "description": campaign_data.get("description"),
                    "targetAmount": campaign_data.get("targetAmount"),
                    "category": campaign_data.get("category"),
                    "milestones": milestones,
                }
            )

            if campaign_data.get("mediaPath"):
                self._client.campaigns.upload_media(campaign["id"], campaign_data["mediaPath"])

            if campaign_data.get("metrics"):
                self._client.impact.create_metrics(
                    campaign["id"], {"metrics": campaign_data["metrics"]}
                )

            return campaign
        except GiveHubError as e:
            logger.error(f"Failed to create campaign: {str(e)}")
            raise

    def update_campaign_progress(
        self, campaign_id: str, progress_data: Mapping[str, Any]
    ) -> bool:
        """
        Report progress: update metrics and post an update with media.

        Args:
            campaign_id: The campaign ID
            progress_data: Optional ``metrics`` list and optional ``update``
                dict with title, content, type (default 'progress') and a
                list of media paths

        Returns:
            True once every requested call has succeeded
        """
        try:
            if progress_data.get("metrics"):
                self._client.impact.update_metrics(
                    campaign_id, {"metrics": progress_data["metrics"]}
                )

            update_data = progress_data.get("update")
            if update_data:
                update = self._client.updates.create(
                    {
                        "campaignId": campaign_id,
                        "title": update_data.get("title"),
                        "content": update_data.get("content"),
                        "type": update_data.get("type") or "progress",
                    }
                )
                for media_path in update_data.get("media") or []:
                    self._client.updates.upload_media(update["id"], media_path)

            return True
        except GiveHubError as e:
            logger.error(f"Failed to update campaign progress: {str(e)}")
            raise


class DonationProcessor:
    """
    Validates and submits donations, setting up recurring ones as needed.

    Examples:
        >>> processor = DonationProcessor(client)
        >>> processor.process_donation({
        ...     "campaignId": "campaign-id", "amount": 1000, "currency": "USD",
        ...     "type": "recurring", "frequency": "monthly", "duration": 12,
        ... })
    """

    REQUIRED_FIELDS = ("campaignId", "amount", "currency")

    def __init__(self, client: GiveHubClient) -> None:
        self._client = client

    def process_donation(self, donation_data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate and create a donation.

        Args:
            donation_data: campaignId, amount, currency, and optionally type
                ('one-time' or 'recurring'), frequency, duration, metadata

        Returns:
            The created donation

        Raises:
            ValidationError: If a required field is missing or the amount
                is not a positive number
            ApiError: If an API call fails
        """
        try:
            amount = self.validate(donation_data)

            donation = self._client.donations.create(
                {
                    "campaignId": donation_data["campaignId"],
                    "amount": {
                        "value": amount,
                        "currency": donation_data["currency"],
                    },
                    "type": donation_data.get("type") or "one-time",
                    "metadata": donation_data.get("metadata") or {},
                }
            )

            if donation_data.get("type") == "recurring":
                self._setup_recurring(donation["id"], donation_data)

            return donation
        except GiveHubError as e:
            logger.error(f"Donation processing failed: {str(e)}")
            raise

    def validate(self, donation_data: Mapping[str, Any]) -> Union[int, float]:
        """
        Check required fields and the donation amount.

        Numeric strings such as "1000" are accepted and converted.

        Returns:
            The amount as a number

        Raises:
            ValidationError: If the data is incomplete or the amount is invalid
        """
        for field in self.REQUIRED_FIELDS:
            if donation_data.get(field) is None:
                raise ValidationError(f"Missing required field: {field}")

        amount = _to_number(donation_data["amount"])
        if amount is None or amount <= 0:
            raise ValidationError("Invalid donation amount")
        return amount

    def _setup_recurring(
        self, donation_id: str, donation_data: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return self._client.donations.create_recurring(
            {
                "donationId": donation_id,
                "frequency": donation_data.get("frequency") or "monthly",
                "duration": donation_data.get("duration"),
                "metadata": donation_data.get("metadata") or {},
            }
        )


class ImpactTracker:
    """
    Merges new impact readings into a campaign's metrics and announces them.

    Examples:
        >>> tracker = ImpactTracker(client)
        >>> tracker.track_campaign_impact("campaign-id", [
        ...     {"name": "Wells Built", "value": 2, "unit": "wells"},
        ... ])
    """

    def __init__(
        self,
        client: GiveHubClient,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize the tracker.

        Args:
            client: The GiveHub client
            clock: Source of the created/updated timestamps
        """
        self._client = client
        self._clock = clock

    def track_campaign_impact(
        self, campaign_id: str, metrics: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Merge ``metrics`` into the campaign's metrics and post an impact update.

        Metrics are matched by name. Matching metrics keep their stored
        fields and get the new value plus an ``updated`` timestamp; new
        metrics get a ``created`` timestamp. Only the metrics passed in are
        submitted.

        Returns:
            The metrics update response
        """
        try:
            existing = self._client.impact.get_metrics(campaign_id)
            merged = self.merge_metrics(existing.get("metrics") or [], metrics)

            result = self._client.impact.update_metrics(campaign_id, {"metrics": merged})

            self._create_impact_update(campaign_id, metrics)

            return result
        except GiveHubError as e:
            logger.error(f"Impact tracking failed: {str(e)}")
            raise

    def merge_metrics(
        self, existing: List[Dict[str, Any]], new: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        merged = []
        for metric in new:
            current = _find_metric(existing, metric["name"])
            if current is not None:
                merged.append({**current, "value": metric.get("value"), "updated": timestamp})
            else:
                merged.append({**metric, "created": timestamp})
        return merged

    def _create_impact_update(
        self, campaign_id: str, metrics: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        content = "Impact Update:\n\n"
        for metric in metrics:
            content += f"- {metric['name']}: {metric.get('value')} {metric.get('unit', '')}\n"

        return self._client.updates.create(
            {
                "campaignId": campaign_id,
                "title": "Impact Metrics Updated",
                "content": content,
                "type": "impact",
            }
        )


def _find_metric(metrics: List[Dict[str, Any]], name: str) -> Optional[Dict[str, Any]]:
    for metric in metrics:
        if metric.get("name") == name:
            return metric
    return None


def _to_number(value: Any) -> Optional[Union[int, float]]:
    """Return ``value`` as an int or float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return None
    return None
