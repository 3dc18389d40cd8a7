"""Utility functions."""

from .formatting import format_ki, format_status, truncate_text
from .normalization import normalize

__all__ = [
    "normalize",
    "truncate_text",
    "format_ki",
    "format_status",
]
