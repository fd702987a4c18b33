"""Tests for the workflow helpers built on top of the client."""

from datetime import datetime
from unittest.mock import MagicMock, call

import pytest

from givehub.exceptions import ApiError, ValidationError
from givehub.workflows import CampaignManager, DonationProcessor, ImpactTracker


FIXED_NOW = datetime(2024, 6, 1, 12, 30, 0)


@pytest.fixture
def client():
    """A GiveHubClient stand-in whose resources are MagicMocks."""
    return MagicMock()


# ── CampaignManager ──────────────────────────────────────────────────


class TestCampaignManager:
    CAMPAIGN_DATA = {
        "title": "Clean Water Initiative",
        "description": "Bringing clean water to rural communities",
        "targetAmount": 100000,
        "category": "water",
    }
    MILESTONES = [{"description": "Initial Survey", "amount": 10000}]

    def test_create_campaign_only(self, client):
        client.campaigns.create.return_value = {"id": "c1"}

        result = CampaignManager(client).create_campaign_with_milestones(
            self.CAMPAIGN_DATA, self.MILESTONES
        )

        assert result == {"id": "c1"}
        client.campaigns.create.assert_called_once_with(
            {**self.CAMPAIGN_DATA, "milestones": self.MILESTONES}
        )
        client.campaigns.upload_media.assert_not_called()
        client.impact.create_metrics.assert_not_called()

    def test_create_with_media_and_metrics(self, client):
        client.campaigns.create.return_value = {"id": "c1"}
        metrics = [{"name": "Wells Built", "value": 0, "target": 10, "unit": "wells"}]
        data = {**self.CAMPAIGN_DATA, "mediaPath": "/tmp/image.jpg", "metrics": metrics}

        CampaignManager(client).create_campaign_with_milestones(data, self.MILESTONES)

        client.campaigns.upload_media.assert_called_once_with("c1", "/tmp/image.jpg")
        client.impact.create_metrics.assert_called_once_with("c1", {"metrics": metrics})

    def test_create_failure_is_logged_and_reraised(self, client, caplog):
        client.campaigns.create.side_effect = ApiError("Invalid campaign", 422)

        with pytest.raises(ApiError, match="Invalid campaign"):
            CampaignManager(client).create_campaign_with_milestones(
                self.CAMPAIGN_DATA, self.MILESTONES
            )

        assert "Failed to create campaign: Invalid campaign" in caplog.text

    def test_update_progress(self, client):
        client.updates.create.return_value = {"id": "u1"}
        progress = {
            "metrics": [{"name": "Wells Built", "value": 1}],
            "update": {
                "title": "First Well Completed",
                "content": "We have completed the first well.",
                "media": ["/tmp/a.jpg", "/tmp/b.jpg"],
            },
        }

        assert CampaignManager(client).update_campaign_progress("c1", progress) is True

        client.impact.update_metrics.assert_called_once_with(
            "c1", {"metrics": [{"name": "Wells Built", "value": 1}]}
        )
        client.updates.create.assert_called_once_with(
            {
                "campaignId": "c1",
                "title": "First Well Completed",
                "content": "We have completed the first well.",
                "type": "progress",
            }
        )
        assert client.updates.upload_media.call_args_list == [
            call("u1", "/tmp/a.jpg"),
            call("u1", "/tmp/b.jpg"),
        ]

    def test_update_progress_with_nothing_to_do(self, client):
        assert CampaignManager(client).update_campaign_progress("c1", {}) is True

        client.impact.update_metrics.assert_not_called()
        client.updates.create.assert_not_called()


# ── DonationProcessor ────────────────────────────────────────────────


class TestDonationProcessor:
    def test_one_time_donation(self, client):
        client.donations.create.return_value = {"id": "d1"}

        result = DonationProcessor(client).process_donation(
            {"campaignId": "c1", "amount": 25, "currency": "USD"}
        )

        assert result == {"id": "d1"}
        client.donations.create.assert_called_once_with(
            {
                "campaignId": "c1",
                "amount": {"value": 25, "currency": "USD"},
                "type": "one-time",
                "metadata": {},
            }
        )
        client.donations.create_recurring.assert_not_called()

    def test_recurring_donation(self, client):
        client.donations.create.return_value = {"id": "d1"}
        metadata = {"donor_message": "Keep up the great work!", "anonymous": False}

        DonationProcessor(client).process_donation(
            {
                "campaignId": "c1",
                "amount": 1000,
                "currency": "USD",
                "type": "recurring",
                "duration": 12,
                "metadata": metadata,
            }
        )

        client.donations.create_recurring.assert_called_once_with(
            {
                "donationId": "d1",
                "frequency": "monthly",
                "duration": 12,
                "metadata": metadata,
            }
        )

    @pytest.mark.parametrize("missing", ["campaignId", "amount", "currency"])
    def test_missing_field(self, client, missing):
        data = {"campaignId": "c1", "amount": 10, "currency": "USD"}
        del data[missing]

        with pytest.raises(ValidationError, match=f"Missing required field: {missing}"):
            DonationProcessor(client).process_donation(data)

        client.donations.create.assert_not_called()

    @pytest.mark.parametrize("raw, expected", [("1000", 1000), ("12.5", 12.5), (" 40 ", 40)])
    def test_numeric_string_amount_is_converted(self, client, raw, expected):
        client.donations.create.return_value = {"id": "d1"}

        DonationProcessor(client).process_donation(
            {"campaignId": "c1", "amount": raw, "currency": "USD"}
        )

        sent = client.donations.create.call_args.args[0]
        assert sent["amount"] == {"value": expected, "currency": "USD"}

    @pytest.mark.parametrize("amount", [0, -5, "abc", "-3", "", True, [10]])
    def test_invalid_amount(self, client, amount):
        with pytest.raises(ValidationError, match="Invalid donation amount"):
            DonationProcessor(client).process_donation(
                {"campaignId": "c1", "amount": amount, "currency": "USD"}
            )

    def test_api_failure_is_reraised(self, client, caplog):
        client.donations.create.side_effect = ApiError("Payment declined", 402)

        with pytest.raises(ApiError, match="Payment declined"):
            DonationProcessor(client).process_donation(
                {"campaignId": "c1", "amount": 10, "currency": "USD"}
            )

        assert "Donation processing failed" in caplog.text


# ── ImpactTracker ────────────────────────────────────────────────────


class TestImpactTracker:
    def test_merge_metrics(self, client):
        tracker = ImpactTracker(client, clock=lambda: FIXED_NOW)
        existing = [{"name": "Wells Built", "value": 1, "unit": "wells", "target": 10}]
        new = [
            {"name": "Wells Built", "value": 2, "unit": "wells"},
            {"name": "Water Quality", "value": 95, "unit": "percent"},
        ]

        merged = tracker.merge_metrics(existing, new)

        assert merged == [
            {"name": "Wells Built", "value": 2, "unit": "wells", "target": 10, "updated": "2024-06-01 12:30:00"},
            {"name": "Water Quality", "value": 95, "unit": "percent", "created": "2024-06-01 12:30:00"},
        ]

    def test_track_campaign_impact(self, client):
        client.impact.get_metrics.return_value = {
            "metrics": [{"name": "People Served", "value": 500, "unit": "individuals"}]
        }
        client.impact.update_metrics.return_value = {"success": True}
        metrics = [{"name": "People Served", "value": 1000, "unit": "individuals"}]

        result = ImpactTracker(client, clock=lambda: FIXED_NOW).track_campaign_impact("c1", metrics)

        assert result == {"success": True}
        client.impact.get_metrics.assert_called_once_with("c1")
        client.impact.update_metrics.assert_called_once_with(
            "c1",
            {
                "metrics": [
                    {
                        "name": "People Served",
                        "value": 1000,
                        "unit": "individuals",
                        "updated": "2024-06-01 12:30:00",
                    }
                ]
            },
        )
        client.updates.create.assert_called_once_with(
            {
                "campaignId": "c1",
                "title": "Impact Metrics Updated",
                "content": "Impact Update:\n\n- People Served: 1000 individuals\n",
                "type": "impact",
            }
        )

    def test_no_existing_metrics(self, client):
        client.impact.get_metrics.return_value = {}

        ImpactTracker(client, clock=lambda: FIXED_NOW).track_campaign_impact(
            "c1", [{"name": "Wells Built", "value": 1, "unit": "wells"}]
        )

        submitted = client.impact.update_metrics.call_args.args[1]["metrics"]
        assert submitted == [
            {"name": "Wells Built", "value": 1, "unit": "wells", "created": "2024-06-01 12:30:00"}
        ]

    def test_failure_skips_update_post(self, client, caplog):
        client.impact.get_metrics.side_effect = ApiError("Campaign not found", 404)

        with pytest.raises(ApiError):
            ImpactTracker(client).track_campaign_impact("missing", [])

        client.updates.create.assert_not_called()
        assert "Impact tracking failed" in caplog.text
