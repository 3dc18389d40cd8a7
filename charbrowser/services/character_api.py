"""HTTP adapter for the character catalog API."""

import logging
from typing import Any, List

import httpx
from pydantic import ValidationError

from charbrowser.core.errors import FetchFailedError
from charbrowser.models import (
    Character,
    CharacterDetail,
    CharacterPage,
    PageMeta,
    Transformation,
)

logger = logging.getLogger("CharBrowser.CharacterApiClient")


class CharacterApiClient:
    """Fetches character pages and details using httpx.

    Every failure is raised as ``FetchFailedError``.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = "") -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def fetch_page(self, page_number: int, page_size: int) -> CharacterPage:
        if page_number < 1:
            raise ValueError("page_number must be at least 1")
        if page_size < 1:
            raise ValueError("page_size must be at least 1")

        data = await self._get_json(
            f"{self._base_url}/characters",
            params={"page": page_number, "limit": page_size},
        )
        if not isinstance(data, dict):
            raise FetchFailedError("Unexpected character page payload")

        try:
            meta = PageMeta.model_validate(data.get("meta") or {})
        except ValidationError as e:
            raise FetchFailedError(f"Invalid page metadata: {e}") from e

        items = data.get("items")
        if not isinstance(items, list):
            raise FetchFailedError("Character page has no item list")

        return CharacterPage(items=self._parse_items(items, Character), meta=meta)

    async def fetch_character(self, character_id: int) -> CharacterDetail:
        data = await self._get_json(f"{self._base_url}/characters/{character_id}")
        if not isinstance(data, dict):
            raise FetchFailedError("Unexpected character payload")

        try:
            character = Character.model_validate(data)
        except ValidationError as e:
            raise FetchFailedError(f"Invalid character {character_id}: {e}") from e

        transformations = data.get("transformations") or []
        return CharacterDetail(
            character=character,
            transformations=self._parse_items(transformations, Transformation),
        )

    async def _get_json(self, url: str, params: dict = None) -> Any:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"GET {url} failed with status {status_code}")
            raise FetchFailedError(str(e), status_code=status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"GET {url} failed: {e}")
            raise FetchFailedError(str(e)) from e
        except ValueError as e:
            logger.warning(f"GET {url} returned invalid JSON: {e}")
            raise FetchFailedError(f"Invalid JSON: {e}") from e

    @staticmethod
    def _parse_items(items: List[Any], model) -> list:
        """Validate items one by one, skipping the ones that do not fit ``model``."""
        parsed = []
        for item in items:
            try:
                parsed.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {model.__name__}: {e.error_count()} errors")
        return parsed
