"""Network and scheduling services."""

from .async_runner import AsyncLoopRunner
from .character_api import CharacterApiClient

__all__ = ["AsyncLoopRunner", "CharacterApiClient"]
