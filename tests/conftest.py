"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add tests/ to path for fakes imports
sys.path.insert(0, str(Path(__file__).parent))

from fakes.fake_catalog_port import FakeCatalogPort, make_character  # noqa: E402


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def temp_css_path(tmp_path: Path) -> Path:
    css_path = tmp_path / "style.css"
    css_path.write_text("/* test css */")
    return css_path


@pytest.fixture
def fake_port() -> FakeCatalogPort:
    return FakeCatalogPort()


@pytest.fixture
def dragon_ball_characters():
    return [
        make_character(1, "Goku", "Saiyan"),
        make_character(2, "Gohan", "Saiyan"),
        make_character(3, "Piccolo", "Namekian"),
    ]


@pytest.fixture
def paged_port() -> FakeCatalogPort:
    """Three pages of three characters each, ids 1-9."""
    port = FakeCatalogPort(total_pages=3)
    for page_number in range(1, 4):
        start = (page_number - 1) * 3 + 1
        port.set_page(
            page_number,
            [make_character(i, f"Character {i}", "Human") for i in range(start, start + 3)],
        )
    return port
