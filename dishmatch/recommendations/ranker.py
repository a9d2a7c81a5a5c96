from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..catalog.catalog import IngredientCatalog, as_catalog
from ..catalog.models import Ingredient
from ..errors import InvalidInput
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import DishMatch
from .profile import coerce_profile, normalize_profile
from .scorer import score_dish

Resolver = Callable[[str], Sequence[Ingredient]]


def split_dishes(menu_text: str) -> list[str]:
    """Return the non-empty, trimmed lines of *menu_text* in their original order."""
    # Only "\n" separates dishes, strip() drops a trailing "\r"
    return [line.strip() for line in menu_text.split("\n") if line.strip()]


def rank_dishes(
    menu_text: str,
    profile: Any,
    catalog: IngredientCatalog | Sequence[Ingredient],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    resolver: Resolver | None = None,
) -> list[DishMatch]:
    """
    Score every dish line of *menu_text* and rank them best first.

    The profile is normalized first (avoid > dislike > like), so an id
    listed in several buckets counts only in the strictest one. Equal
    scores keep their menu order. Unsafe dishes are never dropped;
    they carry the avoid score and sink to the bottom.
    """
    if not isinstance(menu_text, str):
        raise InvalidInput("menu_text must be a string")
    taste, _ = normalize_profile(coerce_profile(profile))
    known = as_catalog(catalog)
    resolve = resolver or known.resolve_in_text

    matches = [
        score_dish(line, resolve(line), taste, config)
        for line in split_dishes(menu_text)
    ]
    # sorted() is stable, so ties stay in menu order
    return sorted(matches, key=lambda m: -m.score)
