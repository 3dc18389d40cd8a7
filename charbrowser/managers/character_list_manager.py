"""Character list manager - infinite scroll, refresh and search over loaded data."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Set, Tuple

from charbrowser.config.settings import DEFAULT_PAGE_SIZE
from charbrowser.core.protocols import CatalogFetchPort
from charbrowser.managers.pagination_manager import PaginationManager
from charbrowser.managers.search_manager import SearchManager
from charbrowser.models import Character, CharacterPage

logger = logging.getLogger("CharBrowser.CharacterListManager")

LOAD_ERROR_MESSAGE = "Failed to load characters. Please try again."


class ListStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ListSnapshot:
    """Read-only view of the list state handed to the presentation layer."""

    visible_records: Tuple[Character, ...]
    status: ListStatus
    has_more: bool
    error_message: Optional[str]
    search_term: str
    current_page: int
    loaded_count: int

    @property
    def loading(self) -> bool:
        return self.status is ListStatus.LOADING

    @property
    def searching(self) -> bool:
        return bool(self.search_term.strip())


class CharacterListManager:
    """Owns the loaded characters, the page cursor and the search term.

    All methods must be called from the same event loop. Fetch results are
    tagged with the pagination generation at the time the request was issued
    and dropped if a refresh (or dispose) happened in the meantime.
    """

    def __init__(
        self,
        fetch_port: CatalogFetchPort,
        page_size: int = DEFAULT_PAGE_SIZE,
        on_change: Optional[Callable[[ListSnapshot], None]] = None,
    ):
        """Initialize CharacterListManager.

        Args:
            fetch_port: Source of character pages
            page_size: Number of characters requested per page
            on_change: Called with a new snapshot after every state change
        """
        self.fetch_port = fetch_port
        self.pagination = PaginationManager(page_size)
        self.search = SearchManager()
        self.on_change = on_change

        self.status = ListStatus.IDLE
        self.error_message: Optional[str] = None
        self._characters: List[Character] = []
        self._ids: Set[int] = set()
        self._version = 0
        self._disposed = False

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more

    @property
    def current_page(self) -> int:
        return self.pagination.current_page

    @property
    def search_term(self) -> str:
        return self.search.get_query()

    @property
    def characters(self) -> Tuple[Character, ...]:
        """Every loaded character, in first-seen order."""
        return tuple(self._characters)

    @property
    def visible_records(self) -> Tuple[Character, ...]:
        return tuple(self.search.apply(self._characters, self._version))

    @property
    def disposed(self) -> bool:
        return self._disposed

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            visible_records=self.visible_records,
            status=self.status,
            has_more=self.has_more,
            error_message=self.error_message,
            search_term=self.search_term,
            current_page=self.current_page,
            loaded_count=len(self._characters),
        )

    async def start(self) -> None:
        """Initial load. Does nothing once anything has been loaded."""
        if self._disposed or self.status is not ListStatus.IDLE:
            return
        await self.refresh()

    async def load_more(self) -> None:
        """Fetch and append the next page if pagination is possible."""
        if self._disposed:
            return
        if self.search.is_active():
            logger.debug("Search is active, not loading more characters")
            return
        if not self.pagination.can_load_more():
            logger.debug("Cannot load more characters.")
            return

        page_number = self.pagination.next_page
        generation = self.pagination.start_loading()
        self._set_status(ListStatus.LOADING)
        logger.info(f"Loading page {page_number}...")

        page = await self._fetch(page_number, generation)
        if page is None:
            return

        added = self._merge(page.items)
        self.pagination.finish_loading(page_number, page.meta.total_pages)
        logger.info(
            f"Page {page_number}/{page.meta.total_pages} loaded, "
            f"{added} new of {len(page.items)} characters"
        )
        self._set_status(ListStatus.READY)

    async def refresh(self) -> None:
        """Drop everything loaded so far and load page 1 again."""
        if self._disposed:
            return

        generation = self.pagination.reset()
        self.pagination.start_loading()
        self._characters = []
        self._ids = set()
        self._version += 1
        self.error_message = None
        self._set_status(ListStatus.LOADING)
        logger.info("Refreshing character list...")

        page = await self._fetch(1, generation)
        if page is None:
            return

        self._merge(page.items)
        self.pagination.finish_loading(1, page.meta.total_pages)
        logger.info(
            f"Refreshed with {len(self._characters)} characters "
            f"({page.meta.total_pages} pages)"
        )
        self._set_status(ListStatus.READY)

    def set_search_term(self, term: Optional[str]) -> None:
        """Update the search term. Filtering only uses loaded characters."""
        if self._disposed:
            return
        self.search.set_query(term)
        self._publish()

    def dispose(self) -> None:
        """End the manager's lifetime; pending fetch results are ignored."""
        if self._disposed:
            return
        self._disposed = True
        self.pagination.invalidate()
        self.on_change = None
        logger.debug("Character list manager disposed")

    async def _fetch(self, page_number: int, generation: int) -> Optional[CharacterPage]:
        """Fetch a page; returns None if it failed or was superseded."""
        try:
            page = await self.fetch_port.fetch_page(
                page_number, self.pagination.page_size
            )
        except Exception as e:
            if not self._is_current(generation):
                logger.info(f"Ignoring failure of superseded page {page_number}: {e}")
                return None
            logger.error(f"Error loading page {page_number}: {e}")
            self.pagination.fail()
            self.error_message = LOAD_ERROR_MESSAGE
            self._set_status(ListStatus.FAILED)
            return None

        if not self._is_current(generation):
            logger.info(f"Discarding stale page {page_number}")
            return None
        return page

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and self.pagination.is_current(generation)

    def _merge(self, characters: Iterable[Character]) -> int:
        added = 0
        for character in characters:
            character_id = getattr(character, "id", None)
            if character_id is None:
                logger.warning("Skipping character without an id")
                continue
            if character_id in self._ids:
                logger.debug(f"Dropping duplicate character {character_id}")
                continue
            self._ids.add(character_id)
            self._characters.append(character)
            added += 1
        if added:
            self._version += 1
        return added

    def _set_status(self, status: ListStatus) -> None:
        self.status = status
        self._publish()

    def _publish(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
