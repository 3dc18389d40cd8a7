"""Debounced search entry for the character list."""

from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk


class SearchBar:
    """Reports the search text after typing pauses for ``debounce_ms``.

    Blank text is reported as ``""`` straight away so the list resumes
    paging without waiting. Pressing Enter flushes the pending text. The
    same text is never reported twice in a row.
    """

    def __init__(
        self,
        on_search: Callable[[str], None],
        placeholder: str = "Search character or race...",
        debounce_ms: int = 300,
    ):
        self.on_search = on_search
        self.placeholder = placeholder
        self.debounce_ms = debounce_ms
        self.pending_timer: Optional[int] = None
        self.last_query = ""
        self.entry: Optional[Gtk.SearchEntry] = None

    def build(self) -> Gtk.Widget:
        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        box.set_margin_start(8)
        box.set_margin_end(8)
        box.set_margin_top(8)
        box.set_margin_bottom(4)

        self.entry = Gtk.SearchEntry()
        self.entry.set_hexpand(True)
        self.entry.set_placeholder_text(self.placeholder)
        self.entry.connect("search-changed", self._on_text_changed)
        self.entry.connect("activate", self._on_activate)
        box.append(self.entry)
        return box

    def get_text(self) -> str:
        return self.entry.get_text() if self.entry else ""

    def _on_text_changed(self, entry: Gtk.SearchEntry) -> None:
        self._cancel_pending()
        text = entry.get_text()
        if not text.strip():
            self._emit("")
            return
        self.pending_timer = GLib.timeout_add(self.debounce_ms, self._on_timeout, text)

    def _on_activate(self, entry: Gtk.SearchEntry) -> None:
        self._cancel_pending()
        text = entry.get_text()
        self._emit(text if text.strip() else "")

    def _on_timeout(self, text: str) -> bool:
        self.pending_timer = None
        self._emit(text)
        return False

    def _cancel_pending(self) -> None:
        if self.pending_timer is not None:
            GLib.source_remove(self.pending_timer)
            self.pending_timer = None

    def _emit(self, text: str) -> None:
        if text == self.last_query:
            return
        self.last_query = text
        self.on_search(text)
