"""Core abstractions: errors, ports and the dependency container."""

from .errors import CharBrowserError, FetchFailedError
from .protocols import CatalogFetchPort

__all__ = ["CharBrowserError", "FetchFailedError", "CatalogFetchPort"]
