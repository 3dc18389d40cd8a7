"""Character detail manager - loads one character with its transformations."""

import logging
from typing import Callable, List, Optional, Union

from charbrowser.core.errors import FetchFailedError
from charbrowser.core.protocols import CatalogFetchPort
from charbrowser.models import Character, Transformation

logger = logging.getLogger("CharBrowser.CharacterDetailManager")

INVALID_ID_MESSAGE = "Invalid or missing character ID"
NOT_FOUND_MESSAGE = "Character not found."
LOAD_ERROR_MESSAGE = "Failed to load character. Please try again."


def parse_character_id(value: Union[int, str, None]) -> Optional[int]:
    """Return a positive integer id, or None if ``value`` is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    try:
        parsed = int(str(value).strip(), 10)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


class CharacterDetailManager:
    def __init__(
        self,
        fetch_port: CatalogFetchPort,
        on_change: Optional[Callable[["CharacterDetailManager"], None]] = None,
    ):
        self.fetch_port = fetch_port
        self.on_change = on_change

        self.character_id: Optional[int] = None
        self.character: Optional[Character] = None
        self.transformations: List[Transformation] = []
        self.loading = False
        self.error_message: Optional[str] = None
        self._generation = 0
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def load(self, character_id: Union[int, str, None]) -> None:
        if self._disposed:
            return
        self._generation += 1
        generation = self._generation

        self.character = None
        self.transformations = []
        self.character_id = parse_character_id(character_id)
        if self.character_id is None:
            logger.warning(f"Invalid character id: {character_id!r}")
            self.loading = False
            self.error_message = INVALID_ID_MESSAGE
            self._publish()
            return

        self.loading = True
        self.error_message = None
        self._publish()

        try:
            detail = await self.fetch_port.fetch_character(self.character_id)
        except FetchFailedError as e:
            if generation != self._generation:
                return
            logger.error(f"Error loading character {self.character_id}: {e}")
            self.loading = False
            self.error_message = NOT_FOUND_MESSAGE if e.not_found else LOAD_ERROR_MESSAGE
            self._publish()
            return

        if generation != self._generation:
            logger.debug(f"Discarding stale detail for character {self.character_id}")
            return

        self.character = detail.character
        self.transformations = list(detail.transformations)
        self.loading = False
        self._publish()

    def dispose(self) -> None:
        """Stop publishing; a fetch still in flight is discarded when it lands."""
        if self._disposed:
            return
        self._disposed = True
        self._generation += 1
        self.on_change = None
        logger.debug("Character detail manager disposed")

    def _publish(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
