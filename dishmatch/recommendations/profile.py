from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import InvalidInput
from .models import TasteProfile

_SESSION_KEY = "taste_profile"


def coerce_profile(profile: Any) -> TasteProfile:
    """Return *profile* as a ``TasteProfile``, accepting plain ``{like, dislike, avoid}`` mappings."""
    if isinstance(profile, TasteProfile):
        return profile
    if isinstance(profile, Mapping):
        try:
            return TasteProfile.model_validate(profile)
        except ValidationError as exc:
            raise InvalidInput(f"Malformed taste profile: {exc}") from exc
    raise InvalidInput("profile must be a TasteProfile or a {like, dislike, avoid} mapping")


def normalize_profile(profile: TasteProfile) -> tuple[TasteProfile, list[str]]:
    """Make the three buckets disjoint, strictest bucket first.

    avoid > dislike > like: an id in several buckets is kept only in the
    strictest one. Returns the normalized profile and the sorted ids that
    had to be moved.
    """
    avoid = profile.avoid
    dislike = profile.dislike - avoid
    like = profile.like - avoid - profile.dislike

    conflicts = (profile.like & (profile.dislike | avoid)) | (profile.dislike & avoid)
    if not conflicts:
        return profile, []
    return TasteProfile(like=like, dislike=dislike, avoid=avoid), sorted(conflicts)


def load_session_profile(session: Mapping[str, Any]) -> TasteProfile | None:
    raw = session.get(_SESSION_KEY)
    if not raw:
        return None
    try:
        return TasteProfile.model_validate(raw)
    except ValidationError:
        return None


def save_session_profile(session: dict[str, Any], profile: TasteProfile) -> None:
    session[_SESSION_KEY] = profile.model_dump(mode="json")
