from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Iterator, Sequence

from ..errors import CatalogError, InvalidInput
from .matching import check_match_mode, contains_term, match_terms
from .models import Ingredient


class IngredientCatalog:
    """Read-only ingredient vocabulary with substring search and text resolution.

    Ingredient order is preserved everywhere: ``search`` and
    ``resolve_in_text`` return ingredients in catalog order.
    """

    def __init__(self, ingredients: Iterable[Ingredient], match_mode: str = "substring") -> None:
        self._ingredients: tuple[Ingredient, ...] = tuple(ingredients)
        self._match_mode = check_match_mode(match_mode)

        self._by_id: dict[str, Ingredient] = {}
        for ing in self._ingredients:
            if not isinstance(ing, Ingredient):
                raise CatalogError(f"Catalog entries must be Ingredient, got {type(ing).__name__}")
            if ing.id in self._by_id:
                raise CatalogError(f"Duplicate ingredient id: {ing.id}")
            self._by_id[ing.id] = ing

        # Match terms (lowercased, with singular forms) are built once per catalog.
        self._terms: tuple[tuple[Ingredient, tuple[str, ...]], ...] = tuple(
            (ing, match_terms(ing.terms)) for ing in self._ingredients
        )
        self._fingerprint: str | None = None

    def __len__(self) -> int:
        return len(self._ingredients)

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._ingredients)

    def __contains__(self, ingredient_id: object) -> bool:
        return ingredient_id in self._by_id

    @property
    def match_mode(self) -> str:
        return self._match_mode

    @property
    def ingredients(self) -> tuple[Ingredient, ...]:
        return self._ingredients

    @property
    def fingerprint(self) -> str:
        """Stable hash of the catalog content, used to key resolution caches."""
        if self._fingerprint is None:
            payload = json.dumps(
                {
                    "match_mode": self._match_mode,
                    "items": [[i.id, i.name, list(i.aliases)] for i in self._ingredients],
                },
                sort_keys=True,
            )
            self._fingerprint = hashlib.sha256(payload.encode()).hexdigest()[:16]
        return self._fingerprint

    def get(self, ingredient_id: str) -> Ingredient | None:
        return self._by_id.get(ingredient_id)

    def search(self, query: str) -> list[Ingredient]:
        """Return ingredients whose name or any alias contains *query* (case-insensitive).

        An empty query returns the whole catalog.
        """
        q = (query or "").strip().lower()
        if not q:
            return list(self._ingredients)
        return [ing for ing, terms in self._terms if any(q in t for t in terms)]

    def resolve_in_text(self, text: str) -> list[Ingredient]:
        """Return every ingredient occurring in *text*, each at most once."""
        lowered = text.lower()
        return [
            ing
            for ing, terms in self._terms
            if any(contains_term(lowered, t, self._match_mode) for t in terms)
        ]


def as_catalog(catalog: IngredientCatalog | Sequence[Ingredient]) -> IngredientCatalog:
    """Accept a ready catalog or a plain sequence of ingredients."""
    if isinstance(catalog, IngredientCatalog):
        return catalog
    if isinstance(catalog, (str, bytes)) or not isinstance(catalog, Sequence):
        raise InvalidInput("catalog must be an IngredientCatalog or a sequence of Ingredient")
    if not all(isinstance(ing, Ingredient) for ing in catalog):
        raise InvalidInput("catalog entries must be Ingredient instances")
    try:
        return IngredientCatalog(catalog)
    except CatalogError as exc:
        raise InvalidInput(str(exc)) from exc


def resolve_ingredients(
    text: str,
    catalog: IngredientCatalog | Sequence[Ingredient],
) -> list[Ingredient]:
    """Return every catalog ingredient whose name or alias occurs in *text*."""
    if not isinstance(text, str):
        raise InvalidInput("text must be a string")
    return as_catalog(catalog).resolve_in_text(text)
