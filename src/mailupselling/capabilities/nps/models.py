"""Domain and wire models for NPS feedback."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

NO_RATING = -1
DEVICE_OS = "Android"


class InstalledProtonApp(str, Enum):
    """Sibling applications whose presence is reported with feedback."""

    VPN = "VPN"
    PASS = "Pass"
    WALLET = "Wallet"
    CALENDAR = "Calendar"
    DRIVE = "Drive"


@dataclass(frozen=True)
class PrimaryUser:
    user_id: str
    create_time: int  # Unix seconds


@dataclass(frozen=True)
class AccountAge:
    days: int


@dataclass(frozen=True)
class SubscriptionName:
    value: str


class NPSFeedbackBody(BaseModel):
    """Payload posted to the feedback endpoints."""

    model_config = ConfigDict(frozen=True)

    rating_value: int = Field(..., ge=NO_RATING, le=10, description="-1 when unrated")
    comment: Optional[str] = Field(None, description="Free-text comment")
    user_tier: str = Field("", description="Subscription name, empty if unknown")
    user_country: str = Field("", description="<locale>-<timezone>")
    device_os: str = Field(DEVICE_OS)
    days_from_signup: int = Field(0, ge=0)
    vpn_installed: bool = False
    pass_installed: bool = False
    wallet_installed: bool = False
    calendar_installed: bool = False
    drive_installed: bool = False

    @property
    def has_rating(self) -> bool:
        return self.rating_value != NO_RATING

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


__all__ = [
    "AccountAge",
    "DEVICE_OS",
    "InstalledProtonApp",
    "NO_RATING",
    "NPSFeedbackBody",
    "PrimaryUser",
    "SubscriptionName",
]
