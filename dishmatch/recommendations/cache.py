from __future__ import annotations

import hashlib
import threading
import time
from typing import Any

from ..catalog.catalog import IngredientCatalog
from ..catalog.models import Ingredient

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0
_lock = threading.Lock()
_DEFAULT_TTL = 300  # 5 minutes
_MAX_ENTRIES = 10_000


def _make_key(fingerprint: str, text: str) -> str:
    # Exact text, no normalisation: "Garlic" and "garlic " are different keys.
    normalized = f"{fingerprint}\x00{text}"
    return hashlib.sha256(normalized.encode()).hexdigest()


def cache_get(fingerprint: str, text: str) -> tuple[str, ...] | None:
    """Return cached ingredient ids for *text* under catalog *fingerprint*."""
    global _hits, _misses
    key = _make_key(fingerprint, text)
    with _lock:
        entry = _cache.get(key)
        if entry and time.time() - entry["created_at"] < _DEFAULT_TTL:
            _hits += 1
            return entry["value"]
        if entry:
            del _cache[key]
        _misses += 1
        return None


def cache_set(fingerprint: str, text: str, ingredient_ids: tuple[str, ...]) -> None:
    key = _make_key(fingerprint, text)
    with _lock:
        if len(_cache) >= _MAX_ENTRIES and key not in _cache:
            # Oldest insertion goes first
            del _cache[next(iter(_cache))]
        _cache[key] = {"value": tuple(ingredient_ids), "created_at": time.time()}


def cached_resolver(catalog: IngredientCatalog):
    """Wrap ``catalog.resolve_in_text`` with the shared text-keyed cache.

    Entries are keyed by the catalog fingerprint, so a reloaded or edited
    catalog never sees results resolved against the old one.
    """
    fingerprint = catalog.fingerprint

    def resolve(text: str) -> list[Ingredient]:
        ids = cache_get(fingerprint, text)
        if ids is not None:
            return [catalog.get(i) for i in ids]
        found = catalog.resolve_in_text(text)
        cache_set(fingerprint, text, tuple(ing.id for ing in found))
        return found

    return resolve


def get_cache_stats() -> dict:
    with _lock:
        total = _hits + _misses
        return {
            "size": len(_cache),
            "hits": _hits,
            "misses": _misses,
            "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
        }


def clear_cache() -> None:
    global _hits, _misses
    with _lock:
        _cache.clear()
        _hits = 0
        _misses = 0
