from __future__ import annotations

from .catalog import IngredientCatalog
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .loader import load_catalog

_catalog: IngredientCatalog | None = None


def get_catalog() -> IngredientCatalog:
    """Return the process-wide ingredient catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def reload_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> IngredientCatalog:
    """Replace the process-wide catalog with a freshly loaded one."""
    global _catalog
    _catalog = load_catalog(config)
    return _catalog


def set_catalog(catalog: IngredientCatalog | None) -> None:
    """Install *catalog* as the process-wide catalog (``None`` forces a reload)."""
    global _catalog
    _catalog = catalog
