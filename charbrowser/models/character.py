"""Character catalog models.

Field names follow Python conventions; the API's camelCase keys are accepted
through aliases.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _ki_to_text(value: Any) -> Any:
    # The API mostly sends ki as formatted text ("60.000.000") but not always
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class Transformation(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = ""
    image: str = ""
    ki: str = ""

    @field_validator("ki", mode="before")
    @classmethod
    def validate_ki(cls, v: Any) -> Any:
        return _ki_to_text(v)


class Character(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = ""
    race: str = ""
    ki: str = ""
    max_ki: str = Field(default="", alias="maxKi")
    gender: str = ""
    description: str = ""
    image: str = ""
    affiliation: str = ""

    @field_validator("ki", "max_ki", mode="before")
    @classmethod
    def validate_ki(cls, v: Any) -> Any:
        return _ki_to_text(v)

    @field_validator(
        "name", "race", "gender", "description", "image", "affiliation", mode="before"
    )
    @classmethod
    def validate_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def category(self) -> str:
        """Classifying field used by search."""
        return self.race


class PageMeta(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current_page: int = Field(alias="currentPage", ge=1)
    total_pages: int = Field(alias="totalPages", ge=1)
    total_items: int = Field(default=0, alias="totalItems", ge=0)
    items_per_page: Optional[int] = Field(default=None, alias="itemsPerPage")

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages


class CharacterPage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: List[Character] = Field(default_factory=list)
    meta: PageMeta


class CharacterDetail(BaseModel):
    """A character with its transformations, as shown on the detail view."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    character: Character
    transformations: List[Transformation] = Field(default_factory=list)
