"""
Typed request records for the GiveHub API.

Records use snake_case attributes and serialize to the camelCase names the
API expects. They describe payload shape only: no value constraints are
applied, and unknown fields are kept and sent through unchanged.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GiveHubModel(BaseModel):
    """Base for all request records."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Dump to the wire shape: camelCase keys, None fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


Payload = Union[GiveHubModel, Mapping[str, Any]]


def to_payload(data: Optional[Payload]) -> Dict[str, Any]:
    """Turn a record or a plain mapping into a request body."""
    if data is None:
        return {}
    if isinstance(data, GiveHubModel):
        return data.to_payload()
    return dict(data)


# ── Auth ──────────────────────────────────────────────────────────────


class LoginRequest(GiveHubModel):
    email: str
    password: str


class RegisterRequest(GiveHubModel):
    email: str
    password: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class VerifyEmailRequest(GiveHubModel):
    email: str
    code: str


class RefreshRequest(GiveHubModel):
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")

    def to_payload(self) -> Dict[str, Any]:
        # The refresh endpoint always receives the key, even when empty
        return self.model_dump(by_alias=True)


class TokenPair(GiveHubModel):
    """The ``tokens`` object returned by a successful login."""

    access_token: Optional[str] = Field(default=None, alias="accessToken")
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")


# ── Campaigns ─────────────────────────────────────────────────────────


class Milestone(GiveHubModel):
    description: str
    amount: Optional[float] = None


class CampaignCreate(GiveHubModel):
    title: str
    description: Optional[str] = None
    target_amount: Optional[float] = Field(default=None, alias="targetAmount")
    category: Optional[str] = None
    milestones: Optional[List[Milestone]] = None


class CampaignUpdate(GiveHubModel):
    title: Optional[str] = None
    description: Optional[str] = None
    target_amount: Optional[float] = Field(default=None, alias="targetAmount")
    category: Optional[str] = None
    status: Optional[str] = None


# ── Donations ─────────────────────────────────────────────────────────


class DonationAmount(GiveHubModel):
    value: float
    currency: str


class DonationCreate(GiveHubModel):
    campaign_id: str = Field(alias="campaignId")
    amount: DonationAmount
    type: Optional[str] = None
    # Free-form; passed through untouched
    metadata: Optional[Dict[str, Any]] = None


class RecurringDonationCreate(GiveHubModel):
    campaign_id: Optional[str] = Field(default=None, alias="campaignId")
    donation_id: Optional[str] = Field(default=None, alias="donationId")
    amount: Optional[DonationAmount] = None
    frequency: Optional[str] = None
    duration: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None


# ── Impact ────────────────────────────────────────────────────────────


class ImpactMetric(GiveHubModel):
    name: str
    value: Any = None
    unit: Optional[str] = None
    target: Optional[Any] = None


class MetricsPayload(GiveHubModel):
    metrics: List[ImpactMetric]


# ── Updates ───────────────────────────────────────────────────────────


class UpdateCreate(GiveHubModel):
    campaign_id: str = Field(alias="campaignId")
    title: str
    content: str
    type: Optional[str] = None
