"""Catalog data models."""

from .character import (
    Character,
    CharacterDetail,
    CharacterPage,
    PageMeta,
    Transformation,
)

__all__ = [
    "Character",
    "CharacterDetail",
    "CharacterPage",
    "PageMeta",
    "Transformation",
]
