"""Application settings configuration."""

from dataclasses import dataclass, field
from typing import Optional

import yaml

DEFAULT_BASE_URL = "https://dragonball-api.com/api"
DEFAULT_PAGE_SIZE = 10
DEFAULT_TIMEOUT_SECONDS = 10.0


# bool is a subclass of int; "page_size: true" must not count as 1
def _is_number(value, types) -> bool:
    return isinstance(value, types) and not isinstance(value, bool)


@dataclass(frozen=True)
class ApiSettings:
    base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class DisplaySettings:
    item_width: int = 360
    item_height: int = 96
    search_debounce_ms: int = 300
    description_length: int = 120


@dataclass(frozen=True)
class WindowSettings:
    default_width: int = 420
    default_height: int = 800


@dataclass(frozen=True)
class AppSettings:
    api: ApiSettings = field(default_factory=ApiSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    window: WindowSettings = field(default_factory=WindowSettings)
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        page_size = config.get("page_size", DEFAULT_PAGE_SIZE)
        if not _is_number(page_size, int) or page_size < 1:
            page_size = DEFAULT_PAGE_SIZE
        timeout_seconds = config.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
        if not _is_number(timeout_seconds, (int, float)) or timeout_seconds <= 0:
            timeout_seconds = DEFAULT_TIMEOUT_SECONDS

        return cls(
            api=ApiSettings(
                base_url=str(config.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
                page_size=page_size,
                timeout_seconds=float(timeout_seconds),
            ),
            display=DisplaySettings(
                item_width=config.get("item_width", 360),
                item_height=config.get("item_height", 96),
                search_debounce_ms=config.get("search_debounce_ms", 300),
                description_length=config.get("description_length", 120),
            ),
            window=WindowSettings(
                default_width=config.get("default_width", 420),
                default_height=config.get("default_height", 800),
            ),
            log_level=str(config.get("log_level", "INFO")).upper(),
        )

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError:
            return {}
        return data if isinstance(data, dict) else {}
