"""Dependency injection container."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import httpx

from charbrowser.config import AppPaths, AppSettings
from charbrowser.core.protocols import CatalogFetchPort
from charbrowser.managers import (
    CharacterDetailManager,
    CharacterListManager,
    ListSnapshot,
)
from charbrowser.services import CharacterApiClient

logger = logging.getLogger("CharBrowser.AppContainer")


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _http_client: Optional[httpx.AsyncClient] = field(
        default=None, init=False, repr=False
    )
    _fetch_port: Optional[CatalogFetchPort] = field(
        default=None, init=False, repr=False
    )

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.api.timeout_seconds,
                headers={"Accept": "application/json"},
            )
        return self._http_client

    @property
    def fetch_port(self) -> CatalogFetchPort:
        if self._fetch_port is None:
            self._fetch_port = CharacterApiClient(
                self.http_client, base_url=self.settings.api.base_url
            )
        return self._fetch_port

    def create_list_manager(
        self, on_change: Optional[Callable[[ListSnapshot], None]] = None
    ) -> CharacterListManager:
        return CharacterListManager(
            self.fetch_port,
            page_size=self.settings.api.page_size,
            on_change=on_change,
        )

    def create_detail_manager(
        self, on_change: Optional[Callable[[CharacterDetailManager], None]] = None
    ) -> CharacterDetailManager:
        return CharacterDetailManager(self.fetch_port, on_change=on_change)

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("HTTP client closed")

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
        fetch_port: Optional[CatalogFetchPort] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        container = cls(
            settings=settings or AppSettings.load(str(paths.config_path)),
            paths=paths,
        )
        container._fetch_port = fetch_port
        return container
