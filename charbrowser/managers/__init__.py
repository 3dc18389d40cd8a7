"""Manager classes for application state."""

from .character_detail_manager import CharacterDetailManager
from .character_list_manager import CharacterListManager, ListSnapshot, ListStatus
from .pagination_manager import PaginationManager
from .search_manager import SearchManager, filter_characters

__all__ = [
    "CharacterListManager",
    "CharacterDetailManager",
    "ListSnapshot",
    "ListStatus",
    "PaginationManager",
    "SearchManager",
    "filter_characters",
]
