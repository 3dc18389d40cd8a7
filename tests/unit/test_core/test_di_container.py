"""Tests for dependency injection container."""

from pathlib import Path

import pytest


def _paths(tmp_path: Path):
    from charbrowser.config import AppPaths

    return AppPaths(config_path=tmp_path / "settings.yml", css_path=tmp_path / "style.css")


def test_container_create_with_defaults(tmp_path: Path):
    from charbrowser.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))

    assert container.settings.api.page_size == 10
    assert container.paths.config_path == tmp_path / "settings.yml"


def test_container_reads_settings_from_config_path(tmp_path: Path):
    from charbrowser.core.di_container import AppContainer

    (tmp_path / "settings.yml").write_text("page_size: 5\n")

    container = AppContainer.create(paths=_paths(tmp_path))

    assert container.settings.api.page_size == 5


def test_container_fetch_port_lazy_singleton(tmp_path: Path):
    from charbrowser.core.di_container import AppContainer
    from charbrowser.services import CharacterApiClient

    container = AppContainer.create(paths=_paths(tmp_path))
    assert container._fetch_port is None
    assert container._http_client is None

    port = container.fetch_port

    assert isinstance(port, CharacterApiClient)
    assert container.fetch_port is port
    assert container._http_client is not None


def test_container_uses_injected_fetch_port(tmp_path: Path, fake_port):
    from charbrowser.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path), fetch_port=fake_port)

    assert container.fetch_port is fake_port
    assert container._http_client is None


def test_container_creates_list_manager(tmp_path: Path, fake_port):
    from charbrowser.config import ApiSettings, AppSettings
    from charbrowser.core.di_container import AppContainer

    container = AppContainer.create(
        settings=AppSettings(api=ApiSettings(page_size=7)),
        paths=_paths(tmp_path),
        fetch_port=fake_port,
    )
    snapshots = []

    manager = container.create_list_manager(on_change=snapshots.append)

    assert manager.fetch_port is fake_port
    assert manager.pagination.page_size == 7
    assert manager.on_change is not None


def test_container_creates_independent_managers(tmp_path: Path, fake_port):
    from charbrowser.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path), fetch_port=fake_port)

    assert container.create_list_manager() is not container.create_list_manager()
    assert container.create_detail_manager().fetch_port is fake_port


@pytest.mark.asyncio
async def test_container_aclose_closes_http_client(tmp_path: Path):
    from charbrowser.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))
    client = container.http_client

    await container.aclose()

    assert client.is_closed
    assert container._http_client is None
