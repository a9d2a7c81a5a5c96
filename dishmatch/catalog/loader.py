from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import CatalogError
from .catalog import IngredientCatalog
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Ingredient

logger = logging.getLogger(__name__)


def _read_records(path: Path) -> list[dict[str, Any]]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {path} ({exc})") from exc

    # Accept both a bare list and the {"items": [...]} shape served by /ingredients
    if isinstance(raw, dict):
        raw = raw.get("items")
    if not isinstance(raw, list):
        raise CatalogError(f"Catalog file must contain a list of ingredients: {path}")
    return raw


def parse_ingredients(records: list[dict[str, Any]]) -> list[Ingredient]:
    ingredients: list[Ingredient] = []
    for pos, record in enumerate(records):
        try:
            ingredients.append(Ingredient.model_validate(record))
        except ValidationError as exc:
            raise CatalogError(f"Invalid ingredient at position {pos}: {exc}") from exc
    return ingredients


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> IngredientCatalog:
    """
    Build the ingredient catalog from the configured JSON file.

    Steps:
    - Read the file (a list of ``{id, name, aliases}`` records).
    - Validate every record into an ``Ingredient``.
    - Reject duplicate ids before anything can score against them.
    """
    records = _read_records(Path(config.catalog_path))
    catalog = IngredientCatalog(parse_ingredients(records), match_mode=config.match_mode)
    logger.info(
        "Loaded %d ingredients from %s (match_mode=%s, fingerprint=%s)",
        len(catalog), config.catalog_path, catalog.match_mode, catalog.fingerprint,
    )
    return catalog
