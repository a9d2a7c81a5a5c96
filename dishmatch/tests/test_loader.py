import json
import logging
from pathlib import Path

import pytest

from dishmatch.catalog.catalog import IngredientCatalog
from dishmatch.catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from dishmatch.catalog.loader import load_catalog
from dishmatch.catalog.models import Ingredient
from dishmatch.catalog.store import get_catalog, reload_catalog, set_catalog
from dishmatch.errors import CatalogError

RECORDS = [
    {"id": "i1", "name": "garlic", "aliases": []},
    {"id": "i2", "name": "peanuts", "aliases": ["groundnut"]},
]


def _write(tmp_path: Path, payload, name: str = "ingredients.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_list_file(tmp_path: Path):
    path = _write(tmp_path, RECORDS)
    catalog = load_catalog(CatalogConfig(catalog_path=path))
    assert len(catalog) == 2
    assert catalog.get("i2").aliases == ("groundnut",)


def test_load_items_wrapper(tmp_path: Path):
    path = _write(tmp_path, {"items": RECORDS})
    catalog = load_catalog(CatalogConfig(catalog_path=path))
    assert [i.name for i in catalog] == ["garlic", "peanuts"]


def test_load_applies_match_mode(tmp_path: Path):
    path = _write(tmp_path, RECORDS)
    catalog = load_catalog(CatalogConfig(catalog_path=path, match_mode="word"))
    assert catalog.match_mode == "word"


def test_load_logs_summary(tmp_path: Path, caplog):
    path = _write(tmp_path, RECORDS)
    with caplog.at_level(logging.INFO, logger="dishmatch.catalog.loader"):
        load_catalog(CatalogConfig(catalog_path=path))
    assert "Loaded 2 ingredients" in caplog.text


def test_load_rejects_duplicate_ids(tmp_path: Path):
    path = _write(tmp_path, RECORDS + [{"id": "i1", "name": "onion", "aliases": []}])
    with pytest.raises(CatalogError, match="Duplicate ingredient id: i1"):
        load_catalog(CatalogConfig(catalog_path=path))


def test_load_rejects_missing_name(tmp_path: Path):
    path = _write(tmp_path, [{"id": "i1", "aliases": []}])
    with pytest.raises(CatalogError, match="position 0"):
        load_catalog(CatalogConfig(catalog_path=path))


def test_load_rejects_non_list(tmp_path: Path):
    path = _write(tmp_path, {"ingredients": RECORDS})
    with pytest.raises(CatalogError):
        load_catalog(CatalogConfig(catalog_path=path))


def test_load_rejects_bad_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog(CatalogConfig(catalog_path=path))


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(CatalogConfig(catalog_path=tmp_path / "nope.json"))


def test_bundled_catalog_loads():
    catalog = load_catalog(DEFAULT_CATALOG_CONFIG)
    assert len(catalog) > 0
    names = [i.name for i in catalog.resolve_in_text("Coriander Leaf garnish.")]
    assert names == ["cilantro"]


def test_store_set_get_and_reload(tmp_path: Path):
    custom = IngredientCatalog([Ingredient(id="x", name="saffron")])
    set_catalog(custom)
    try:
        assert get_catalog() is custom
        path = _write(tmp_path, RECORDS)
        reloaded = reload_catalog(CatalogConfig(catalog_path=path))
        assert get_catalog() is reloaded
        assert len(reloaded) == 2
    finally:
        set_catalog(None)


def test_load_rejects_unknown_match_mode(tmp_path: Path):
    path = _write(tmp_path, RECORDS)
    with pytest.raises(CatalogError, match="Unknown match mode 'fuzzy'"):
        load_catalog(CatalogConfig(catalog_path=path, match_mode="fuzzy"))
