"""Search highlighting for character names."""

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib

from charbrowser.utils.normalization import normalize


def _prefix_length(text: str, query: str) -> int:
    """Number of leading characters of ``text`` whose normalized form is ``query``.

    Returns 0 when ``text`` does not start with ``query``. Normalization can
    drop characters (combining marks, leading spaces), so the length is found
    by walking the original text.
    """
    target = normalize(query)
    if not target or not normalize(text).startswith(target):
        return 0

    for end in range(1, len(text) + 1):
        if normalize(text[:end]) == target:
            # Keep trailing combining marks with their base letter
            while end < len(text) and normalize(text[end]) == "" and not text[end].isspace():
                end += 1
            return end
    return 0


def highlight_prefix(text: str, query: str) -> str:
    """Escape ``text`` as Pango markup and highlight the matched name prefix."""
    if not text:
        return ""
    length = _prefix_length(text, query) if query else 0
    if length == 0:
        return GLib.markup_escape_text(text)

    head = GLib.markup_escape_text(text[:length])
    tail = GLib.markup_escape_text(text[length:])
    return f'<span background="yellow" foreground="black">{head}</span>{tail}'
