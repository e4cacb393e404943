"""Virtual telephony: phone profiles, call quality, routing and dialing."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class PhoneProfile:
    """A phone identity the center can dial out with."""

    id: str
    label: str
    imei: str
    carrier: str


@dataclass(frozen=True)
class CallSession:
    """An outgoing call."""

    id: str
    number: str
    started_at: str
    state: str


_DEFAULT_ROUTE = "virtual-route"

# Number prefixes mapped to dedicated routes; none are configured, so every
# number goes over the default route.
_PREFIX_ROUTES: dict[str, str] = {}


def list_profiles() -> list[PhoneProfile]:
    """The available phone profiles."""
    return [
        PhoneProfile(
            id="profile_default",
            label="MT6883-Default",
            imei="000000000000000",
            carrier="virtual-carrier",
        )
    ]


def current_score() -> int:
    """Current call quality score."""
    return 99


def resolve_route(number: str) -> str:
    """Route used to reach the number: the longest matching prefix route, else the default."""
    digits = number.strip()
    matches = [prefix for prefix in _PREFIX_ROUTES if digits.startswith(prefix)]
    if not matches:
        return _DEFAULT_ROUTE
    return _PREFIX_ROUTES[max(matches, key=len)]


def dial_number(number: str) -> CallSession:
    """Start dialing the number."""
    return CallSession(
        id=str(uuid.uuid4()),
        number=number,
        started_at=datetime.now(timezone.utc).isoformat(),
        state="dialing",
    )