"""
Ingredient-aware dish recommendations for pasted restaurant menus.

The core lives in ``dishmatch.catalog`` (ingredient vocabulary and text
resolution) and ``dishmatch.recommendations`` (scoring and ranking);
``dishmatch.app`` serves it over HTTP.
"""

from .catalog.catalog import IngredientCatalog, resolve_ingredients
from .catalog.models import Ingredient
from .errors import CatalogError, DishmatchError, InvalidInput
from .recommendations.models import DishMatch, TasteProfile
from .recommendations.ranker import rank_dishes

__all__ = [
    "CatalogError",
    "DishMatch",
    "DishmatchError",
    "Ingredient",
    "IngredientCatalog",
    "InvalidInput",
    "TasteProfile",
    "rank_dishes",
    "resolve_ingredients",
]
