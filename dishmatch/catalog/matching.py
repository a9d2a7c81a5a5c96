from __future__ import annotations

import re
from functools import lru_cache

from ..errors import CatalogError
from .config import MATCH_MODES


@lru_cache(maxsize=4096)
def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)")


def check_match_mode(mode: str) -> str:
    if mode not in MATCH_MODES:
        raise CatalogError(f"Unknown match mode {mode!r}, expected one of {MATCH_MODES}")
    return mode


def contains_term(text_lower: str, term: str, mode: str = "substring") -> bool:
    """Return True if lowercased *term* occurs in already-lowercased *text_lower*.

    ``substring`` matches anywhere ("pea" hits "peanut"); ``word`` requires
    that the term is not glued to other letters or digits on either side.
    """
    if not term:
        return False
    if mode == "word":
        return _word_pattern(term).search(text_lower) is not None
    return term in text_lower


def singular_form(term: str) -> str | None:
    """Return the term without a plain plural "s", or None when it has none.

    Catalog names are often plural ("peanuts") while menus use the
    attributive singular ("Peanut Satay").
    """
    if len(term) > 3 and term.endswith("s") and not term.endswith("ss"):
        return term[:-1]
    return None


def match_terms(terms: tuple[str, ...]) -> tuple[str, ...]:
    """Expand lowercased terms with their singular forms, keeping order."""
    expanded: dict[str, None] = {}
    for term in terms:
        expanded.setdefault(term, None)
        singular = singular_form(term)
        if singular:
            expanded.setdefault(singular, None)
    return tuple(expanded)
