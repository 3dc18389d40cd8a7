"""Search manager - client-side search over already loaded characters."""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from charbrowser.models import Character
from charbrowser.utils.normalization import normalize

logger = logging.getLogger("CharBrowser.SearchManager")


def matches(character: Character, normalized_term: str) -> bool:
    """Prefix match on the name, substring match on the category."""
    return normalize(character.name).startswith(normalized_term) or (
        normalized_term in normalize(character.category)
    )


def filter_characters(
    characters: Sequence[Character], term: Optional[str]
) -> List[Character]:
    """Derive the visible list from loaded characters and a search term.

    An empty term returns every character in its original order.
    """
    normalized_term = normalize(term)
    if not normalized_term:
        return list(characters)
    return [c for c in characters if matches(c, normalized_term)]


class SearchManager:
    """Holds the search term and the filtered view derived from it."""

    def __init__(self):
        self.query: str = ""
        self.normalized_query: str = ""
        self._cache_key: Optional[Tuple[int, str]] = None
        self._cache: List[Character] = []

    def set_query(self, query: Optional[str]) -> bool:
        """Store ``query`` verbatim. Returns True if the normalized form changed."""
        query = query or ""
        normalized = normalize(query)
        changed = normalized != self.normalized_query
        self.query = query
        self.normalized_query = normalized
        if changed:
            logger.debug(f"Search query changed to '{normalized}'")
        return changed

    def clear(self) -> None:
        self.set_query("")

    def is_active(self) -> bool:
        """Any non-blank query counts, even one that normalizes to nothing."""
        return bool(self.query.strip())

    def get_query(self) -> str:
        return self.query

    def apply(self, characters: Iterable[Character], version: int) -> List[Character]:
        """Filter ``characters``, reusing the last result for the same inputs.

        ``version`` identifies the contents of ``characters``; the caller bumps
        it whenever the loaded list changes.
        """
        key = (version, self.normalized_query)
        if key != self._cache_key:
            self._cache = filter_characters(list(characters), self.normalized_query)
            self._cache_key = key
        return list(self._cache)
