from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from ..catalog.models import Ingredient


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TasteProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    like: frozenset[str] = Field(default_factory=frozenset)
    dislike: frozenset[str] = Field(default_factory=frozenset)
    avoid: frozenset[str] = Field(default_factory=frozenset)

    @field_serializer("like", "dislike", "avoid")
    def _sorted_ids(self, value: frozenset[str]) -> list[str]:
        return sorted(value)


class DishMatch(_CamelModel):
    dish_text: str
    matched_liked: list[str] = Field(default_factory=list)
    matched_disliked: list[str] = Field(default_factory=list)
    matched_avoid: list[str] = Field(default_factory=list)
    score: int = 0
    explanation: str = ""
    unsafe: bool = False


class RecommendRequest(_CamelModel):
    menu_text: str | None = Field(default=None, max_length=20000)
    profile: TasteProfile | None = Field(
        default=None, description="Falls back to the profile saved in the session"
    )
    hide_unsafe: bool = False


class RecommendResponse(_CamelModel):
    results: list[DishMatch]
    total_dishes: int


class ResolveRequest(BaseModel):
    text: str = Field(..., max_length=2000)


class IngredientList(BaseModel):
    items: list[Ingredient]


class SavedProfileResponse(BaseModel):
    profile: TasteProfile
    conflicts: list[str] = Field(default_factory=list)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
