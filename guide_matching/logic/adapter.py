"""
Data Adapter for the Matching Engine

Transforms raw user/profile records handed over by the collaborator that
owns storage (plain dicts decoded from JSON, or attribute objects such as
ORM rows) into the engine's contracts.

This is a pure TRANSFORM layer:
- NO scoring logic
- NO ranking/classification
- NO storage access
"""

import dataclasses
from typing import Any, Dict, Iterable, Optional, Tuple

from .contracts import TravelerPreferences, GuideCapabilities, GuideCandidate
from .constants import SENSITIVE_FIELDS, UserRole
from .exceptions import TravelerAccessError

# Identity and nested profile keys that are lifted out of the pass-through data
_LIFTED_FIELDS = frozenset({
    "id", "name", "image", "role",
    "guideProfile", "guide_profile", "travelerProfile", "traveler_profile",
})


def _safe_get(record: Any, *keys: str, default=None):
    """
    Read the first present, non-None key from a dict or attribute object.
    Accepts alternative spellings, e.g. _safe_get(r, "averageRating", "average_rating").
    """
    if record is None:
        return default
    for key in keys:
        if isinstance(record, dict):
            value = record.get(key)
        else:
            value = getattr(record, key, None)
        if value is not None:
            return value
    return default


def _as_dict(record: Any) -> Dict[str, Any]:
    """Shallow dict view of a record, skipping private attributes."""
    if record is None:
        return {}
    if isinstance(record, dict):
        return dict(record)
    if hasattr(record, "_asdict"):
        fields = record._asdict()
    elif dataclasses.is_dataclass(record):
        fields = {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    elif hasattr(record, "__dict__"):
        fields = vars(record)
    else:
        fields = {}
    return {k: v for k, v in fields.items() if not k.startswith("_")}


def _codes(values: Optional[Iterable[Any]]) -> frozenset:
    """Normalize enum members or strings to a set of plain codes."""
    if not values:
        return frozenset()
    return frozenset(str(getattr(v, "value", v)) for v in values)


def _role_of(user_record: Any) -> Optional[str]:
    role = _safe_get(user_record, "role")
    if role is None:
        return None
    return str(getattr(role, "value", role)).upper()


def public_fields(record: Any) -> Dict[str, Any]:
    """Copy of a record without credentials."""
    return {k: v for k, v in _as_dict(record).items() if k not in SENSITIVE_FIELDS}


def to_traveler_preferences(profile_record: Any) -> TravelerPreferences:
    """Convert a traveler profile record into TravelerPreferences."""
    return TravelerPreferences(
        preferred_languages=_codes(
            _safe_get(profile_record, "preferredLanguages", "preferred_languages")
        ),
        interests=_codes(_safe_get(profile_record, "interests")),
    )


def to_guide_capabilities(profile_record: Any) -> GuideCapabilities:
    """Convert a guide profile record into GuideCapabilities."""
    return GuideCapabilities(
        languages=_codes(_safe_get(profile_record, "languages")),
        categories=_codes(_safe_get(profile_record, "categories")),
        average_rating=_safe_get(profile_record, "averageRating", "average_rating", default=0.0),
        total_tours=_safe_get(profile_record, "totalTours", "total_tours", default=0),
    )


def extract_traveler(user_record: Any) -> Tuple[Optional[str], TravelerPreferences]:
    """
    Pull the traveler id and preferences out of a user record.

    Raises:
        TravelerAccessError: the user is missing, not a traveler, or has no
            traveler profile
    """
    if user_record is None:
        raise TravelerAccessError()

    role = _role_of(user_record)
    if role is not None and role != UserRole.TRAVELER.value:
        raise TravelerAccessError()

    profile = _safe_get(user_record, "travelerProfile", "traveler_profile")
    if profile is None:
        raise TravelerAccessError()

    user_id = _safe_get(user_record, "id")
    return (str(user_id) if user_id is not None else None), to_traveler_preferences(profile)


def to_guide_candidate(user_record: Any) -> Optional[GuideCandidate]:
    """
    Convert a guide user record into a GuideCandidate.

    Returns None for records that are not guides or have no guide profile.
    Credentials are dropped; remaining fields travel along in `profile`.
    """
    if user_record is None:
        return None

    role = _role_of(user_record)
    if role is not None and role != UserRole.GUIDE.value:
        return None

    profile = _safe_get(user_record, "guideProfile", "guide_profile")
    if profile is None:
        return None

    guide_id = _safe_get(user_record, "id")
    if guide_id is None:
        raise ValueError("guide record has no id")

    passthrough = {
        k: v for k, v in public_fields(user_record).items() if k not in _LIFTED_FIELDS
    }
    passthrough["guide_profile"] = public_fields(profile)

    return GuideCandidate(
        guide_id=str(guide_id),
        name=_safe_get(user_record, "name"),
        image=_safe_get(user_record, "image"),
        capabilities=to_guide_capabilities(profile),
        profile=passthrough,
    )
