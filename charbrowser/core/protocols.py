"""Protocol definitions for dependency injection."""

from typing import Protocol

from charbrowser.models import CharacterDetail, CharacterPage


class CatalogFetchPort(Protocol):
    async def fetch_page(self, page_number: int, page_size: int) -> CharacterPage: ...

    async def fetch_character(self, character_id: int) -> CharacterDetail: ...
