from __future__ import annotations

from collections.abc import Iterable

from ..catalog.models import Ingredient
from ..errors import InvalidInput
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import DishMatch, TasteProfile

AVOID = "avoid"
LIKE = "like"
DISLIKE = "dislike"


def classify(ingredient_id: str, profile: TasteProfile) -> str | None:
    """Return the profile bucket for *ingredient_id*, or None when neutral.

    Precedence is avoid > like > dislike so an avoided ingredient is
    never scored as anything else.
    """
    if ingredient_id in profile.avoid:
        return AVOID
    if ingredient_id in profile.like:
        return LIKE
    if ingredient_id in profile.dislike:
        return DISLIKE
    return None


def build_explanation(liked: list[str], avoided: list[str]) -> str:
    if avoided:
        return f"Rejected due to avoid ingredients: {', '.join(avoided)}"
    return f"Matches liked: {', '.join(liked) or 'none'}"


def score_dish(
    dish_text: str,
    ingredients: Iterable[Ingredient],
    profile: TasteProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> DishMatch:
    """Score one dish line from the ingredients resolved in it."""
    if not isinstance(profile, TasteProfile):
        raise InvalidInput("profile must be a TasteProfile")

    buckets: dict[str, list[str]] = {LIKE: [], DISLIKE: [], AVOID: []}
    seen: set[str] = set()
    for ing in ingredients:
        if ing.id in seen:
            continue
        seen.add(ing.id)
        bucket = classify(ing.id, profile)
        if bucket:
            buckets[bucket].append(ing.name)

    liked, disliked, avoided = buckets[LIKE], buckets[DISLIKE], buckets[AVOID]
    if avoided:
        score = config.avoid_score
    else:
        score = config.like_weight * len(liked) + config.dislike_weight * len(disliked)

    return DishMatch(
        dish_text=dish_text,
        matched_liked=liked,
        matched_disliked=disliked,
        matched_avoid=avoided,
        score=score,
        explanation=build_explanation(liked, avoided),
        unsafe=bool(avoided),
    )
