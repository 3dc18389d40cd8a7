"""Text normalization for diacritic-insensitive search."""

import re
import unicodedata
from typing import Optional

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize(text: Optional[str]) -> str:
    """Return the canonical search form of ``text``.

    Lowercases, decomposes to NFD, drops combining diacritical marks and
    trims surrounding whitespace. ``None`` and empty input give ``""``.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()
