"""Primitive encoding of feedback job parameters.

RQ persists job arguments in Redis, so the payload travels as a flat mapping
of str/int/bool values and is rebuilt into ``NPSFeedbackBody`` at execution.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any, Optional, Union

from mailupselling.capabilities.nps.exceptions import InvalidJobParamsError
from mailupselling.capabilities.nps.models import (
    NO_RATING,
    InstalledProtonApp,
    NPSFeedbackBody,
)

Primitive = Union[str, int, bool]


class Keys:
    USER_ID = "UserId"
    RATING_VALUE = "RatingValue"
    COMMENT = "Comment"
    USER_TIER = "UserTier"
    USER_COUNTRY = "UserCountry"
    DAYS_FROM_SIGNUP = "DaysFromSignup"
    SKIPPED = "Skipped"
    VPN_INSTALLED = "VpnInstalled"
    DRIVE_INSTALLED = "DriveInstalled"
    CALENDAR_INSTALLED = "CalendarInstalled"
    WALLET_INSTALLED = "WalletInstalled"
    PASS_INSTALLED = "PassInstalled"


_APP_KEYS: dict[InstalledProtonApp, str] = {
    InstalledProtonApp.VPN: Keys.VPN_INSTALLED,
    InstalledProtonApp.DRIVE: Keys.DRIVE_INSTALLED,
    InstalledProtonApp.CALENDAR: Keys.CALENDAR_INSTALLED,
    InstalledProtonApp.WALLET: Keys.WALLET_INSTALLED,
    InstalledProtonApp.PASS: Keys.PASS_INSTALLED,
}


def encode_params(
    *,
    user_id: str,
    rating_value: Optional[int],
    comment: Optional[str],
    user_tier: str,
    user_country: str,
    days_from_signup: int,
    skipped: bool,
    installed_apps: Set[InstalledProtonApp],
) -> dict[str, Primitive]:
    params: dict[str, Primitive] = {
        Keys.USER_ID: user_id,
        Keys.RATING_VALUE: NO_RATING if rating_value is None else rating_value,
        Keys.COMMENT: comment or "",
        Keys.USER_TIER: user_tier,
        Keys.USER_COUNTRY: user_country,
        Keys.DAYS_FROM_SIGNUP: days_from_signup,
        Keys.SKIPPED: skipped,
    }
    for app, key in _APP_KEYS.items():
        params[key] = app in installed_apps
    return params


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def decode_params(data: Mapping[str, Any]) -> tuple[str, bool, NPSFeedbackBody]:
    """Rebuild ``(user_id, skipped, body)`` from stored job parameters.

    Raises:
        InvalidJobParamsError: If the user id is missing or blank, or a
            stored value cannot form a valid body.
    """
    user_id = _blank_to_none(data.get(Keys.USER_ID))
    if user_id is None:
        raise InvalidJobParamsError("User id is required and must not be blank")

    try:
        rating_value = int(data.get(Keys.RATING_VALUE, NO_RATING))
        body = NPSFeedbackBody(
            rating_value=rating_value if rating_value >= 0 else NO_RATING,
            comment=_blank_to_none(data.get(Keys.COMMENT)),
            user_tier=_blank_to_none(data.get(Keys.USER_TIER)) or "",
            user_country=_blank_to_none(data.get(Keys.USER_COUNTRY)) or "",
            days_from_signup=int(data.get(Keys.DAYS_FROM_SIGNUP, 0)),
            vpn_installed=bool(data.get(Keys.VPN_INSTALLED, False)),
            drive_installed=bool(data.get(Keys.DRIVE_INSTALLED, False)),
            calendar_installed=bool(data.get(Keys.CALENDAR_INSTALLED, False)),
            wallet_installed=bool(data.get(Keys.WALLET_INSTALLED, False)),
            pass_installed=bool(data.get(Keys.PASS_INSTALLED, False)),
        )
    except (TypeError, ValueError) as exc:
        raise InvalidJobParamsError(
            f"Invalid feedback job parameters: {exc}", original_error=exc
        ) from exc

    skipped = bool(data.get(Keys.SKIPPED, True))
    return user_id, skipped, body


__all__ = ["Keys", "Primitive", "decode_params", "encode_params"]
