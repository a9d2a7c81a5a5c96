from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    aliases: tuple[str, ...] = ()

    @field_validator("id", "name")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("aliases")
    @classmethod
    def _clean_aliases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(a.strip() for a in value if a and a.strip())

    @property
    def terms(self) -> tuple[str, ...]:
        """Lowercased name followed by lowercased aliases, duplicates removed."""
        seen: dict[str, None] = {}
        for term in (self.name, *self.aliases):
            seen.setdefault(term.lower(), None)
        return tuple(seen)
