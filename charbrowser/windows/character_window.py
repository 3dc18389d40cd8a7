"""Main window - browsable, searchable character list."""

import logging
from typing import List, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk

from charbrowser.components.search_bar import SearchBar
from charbrowser.core.di_container import AppContainer
from charbrowser.managers import ListSnapshot
from charbrowser.rows.character_row import CharacterRow
from charbrowser.services import AsyncLoopRunner
from charbrowser.utils.formatting import format_status
from charbrowser.windows.character_detail_window import CharacterDetailWindow

logger = logging.getLogger("CharBrowser.CharacterWindow")

# Distance from the bottom of the list, in pixels, that triggers the next page
SCROLL_THRESHOLD = 50


class CharacterWindow(Gtk.ApplicationWindow):
    def __init__(self, app: Gtk.Application, container: AppContainer, runner: AsyncLoopRunner):
        super().__init__(application=app, title="Dragon Ball Characters")
        self.container = container
        self.runner = runner
        self.settings = container.settings

        self.set_default_size(
            self.settings.window.default_width, self.settings.window.default_height
        )

        self._snapshot: Optional[ListSnapshot] = None
        self._rendered_ids: List[int] = []
        self._rendered_query = ""

        self.list_manager = container.create_list_manager(
            on_change=self._on_list_changed
        )
        self.search_bar = SearchBar(
            on_search=self._on_search,
            debounce_ms=self.settings.display.search_debounce_ms,
        )

        self._build()
        self.connect("close-request", self._on_close_request)

        self.runner.submit(self.list_manager.start())

    def _build(self) -> None:
        header = Gtk.HeaderBar()
        refresh_button = Gtk.Button.new_from_icon_name("view-refresh-symbolic")
        refresh_button.set_tooltip_text("Refresh")
        refresh_button.connect("clicked", lambda button: self.refresh())
        header.pack_end(refresh_button)
        self.set_titlebar(header)

        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        main_box.append(self.search_bar.build())

        self.status_label = Gtk.Label(label="")
        self.status_label.add_css_class("dim-label")
        self.status_label.set_margin_bottom(4)
        main_box.append(self.status_label)

        self.stack = Gtk.Stack()
        self.stack.set_vexpand(True)

        self.loading_label = Gtk.Label(label="Loading characters...")
        self.stack.add_named(self.loading_label, "loading")

        message_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        message_box.set_valign(Gtk.Align.CENTER)
        self.message_label = Gtk.Label(label="")
        self.message_label.set_wrap(True)
        self.message_label.add_css_class("title-4")
        message_box.append(self.message_label)
        self.retry_button = Gtk.Button(label="Try again")
        self.retry_button.set_halign(Gtk.Align.CENTER)
        self.retry_button.connect("clicked", lambda button: self.refresh())
        message_box.append(self.retry_button)
        self.stack.add_named(message_box, "message")

        list_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        self.listbox = Gtk.ListBox()
        self.listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        self.listbox.connect("row-activated", self._on_row_activated)
        list_box.append(self.listbox)

        self.footer_loader = Gtk.Label(label="Loading more characters...")
        self.footer_loader.add_css_class("dim-label")
        self.footer_loader.set_margin_top(8)
        self.footer_loader.set_margin_bottom(8)
        self.footer_loader.set_visible(False)
        list_box.append(self.footer_loader)

        self.scrolled = Gtk.ScrolledWindow()
        self.scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scrolled.set_child(list_box)
        self.scrolled.get_vadjustment().connect("value-changed", self._on_scroll_changed)
        self.stack.add_named(self.scrolled, "list")

        main_box.append(self.stack)
        self.set_child(main_box)

    def refresh(self) -> None:
        logger.info("Refresh requested")
        self.runner.submit(self.list_manager.refresh())

    def _on_search(self, query: str) -> None:
        self.runner.call_soon(self.list_manager.set_search_term, query)

    def _on_scroll_changed(self, adjustment: Gtk.Adjustment) -> None:
        """Handle scroll events for infinite scrolling"""
        snapshot = self._snapshot
        if snapshot is None or snapshot.searching or not snapshot.has_more:
            return

        distance = (
            adjustment.get_upper() - adjustment.get_page_size() - adjustment.get_value()
        )
        if distance < SCROLL_THRESHOLD:
            self.runner.submit(self.list_manager.load_more())

    def _on_list_changed(self, snapshot: ListSnapshot) -> None:
        # Runs on the runner thread; widgets are only touched from the GTK loop
        GLib.idle_add(self._render, snapshot)

    def _render(self, snapshot: ListSnapshot) -> bool:
        self._snapshot = snapshot
        records = snapshot.visible_records

        if snapshot.loading and not records and not snapshot.searching:
            self.stack.set_visible_child_name("loading")
        elif snapshot.error_message and not records:
            self._show_message(snapshot.error_message, retry=True)
        elif not snapshot.loading and not records and snapshot.searching:
            self._show_message(f'No results found for "{snapshot.search_term}"', retry=False)
        else:
            self.stack.set_visible_child_name("list")

        self._render_rows(snapshot)
        self.footer_loader.set_visible(
            snapshot.loading and not snapshot.searching and bool(records)
        )
        self.status_label.set_label(
            format_status(snapshot.loaded_count, snapshot.search_term, len(records))
        )
        if not snapshot.loading:
            # A first page shorter than the window never scrolls; check once laid out
            GLib.idle_add(self._check_scroll_position)
        return False

    def _check_scroll_position(self) -> bool:
        self._on_scroll_changed(self.scrolled.get_vadjustment())
        return False

    def _render_rows(self, snapshot: ListSnapshot) -> None:
        ids = [character.id for character in snapshot.visible_records]
        query = snapshot.search_term

        # Pagination only ever appends; rebuild for anything else
        if query == self._rendered_query and ids[: len(self._rendered_ids)] == self._rendered_ids:
            new_characters = snapshot.visible_records[len(self._rendered_ids):]
        else:
            while True:
                row = self.listbox.get_row_at_index(0)
                if row is None:
                    break
                self.listbox.remove(row)
            new_characters = snapshot.visible_records

        for character in new_characters:
            self.listbox.append(
                CharacterRow(
                    character,
                    search_query=query,
                    item_height=self.settings.display.item_height,
                    description_length=self.settings.display.description_length,
                )
            )

        self._rendered_ids = ids
        self._rendered_query = query

    def _show_message(self, message: str, retry: bool) -> None:
        self.message_label.set_label(message)
        self.retry_button.set_visible(retry)
        self.stack.set_visible_child_name("message")

    def _on_row_activated(self, listbox: Gtk.ListBox, row: CharacterRow) -> None:
        logger.info(f"Opening character {row.character.id}")
        detail = CharacterDetailWindow(self.container, self.runner, row.character.id)
        detail.set_transient_for(self)
        detail.present()

    def _on_close_request(self, window) -> bool:
        self.runner.call_soon(self.list_manager.dispose)
        return False
