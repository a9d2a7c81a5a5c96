from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "ingredients.json"

MATCH_MODES = ("substring", "word")


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for loading and matching the ingredient catalog.
    """

    catalog_path: Path = Path(os.getenv("DISHMATCH_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    match_mode: str = os.getenv("DISHMATCH_MATCH_MODE", "substring")


DEFAULT_CATALOG_CONFIG = CatalogConfig()
