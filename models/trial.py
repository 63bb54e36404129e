from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TrialState(str, Enum):
    INACTIVE = "inactive"
    PREMIUM = "premium"
    EXPIRED = "expired"
    WARNING = "warning"
    ACTIVE = "active"


class ProfileSnapshot(BaseModel):
    """
    Read-only view of the profile fields the trial check consumes.

    Accepts both the backend column names (subscription_status, trial_ends_at)
    and their camelCase forms. trial_ends_at is kept raw so a malformed date
    never fails construction; the evaluator decides what it means.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    subscription_status: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("subscription_status", "subscriptionStatus"),
    )
    trial_ends_at: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("trial_ends_at", "trialEndsAt"),
    )


class TrialStatus(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: TrialState
    days_remaining: int = Field(default=0, ge=0, alias="daysRemaining")


class TrialMessages(BaseModel):
    title: str
    message: str
    icon: str
