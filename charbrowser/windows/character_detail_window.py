"""Detail window - one character and its transformations."""

import logging

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk

from charbrowser.core.di_container import AppContainer
from charbrowser.managers import CharacterDetailManager
from charbrowser.services import AsyncLoopRunner
from charbrowser.utils.formatting import format_ki

logger = logging.getLogger("CharBrowser.CharacterDetailWindow")


class CharacterDetailWindow(Gtk.Window):
    def __init__(self, container: AppContainer, runner: AsyncLoopRunner, character_id):
        super().__init__(title="Character")
        self.set_default_size(
            container.settings.window.default_width,
            container.settings.window.default_height,
        )
        self.runner = runner
        self.character_id = character_id

        self.content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        self.content.set_margin_start(16)
        self.content.set_margin_end(16)
        self.content.set_margin_top(16)
        self.content.set_margin_bottom(16)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_child(self.content)
        self.set_child(scrolled)

        self.detail_manager = container.create_detail_manager(on_change=self._on_detail_changed)
        self.connect("close-request", self._on_close_request)
        self.runner.submit(self.detail_manager.load(character_id))

    def _on_detail_changed(self, manager: CharacterDetailManager) -> None:
        GLib.idle_add(
            self._render,
            manager.loading,
            manager.error_message,
            manager.character,
            list(manager.transformations),
        )

    def _clear(self) -> None:
        child = self.content.get_first_child()
        while child is not None:
            next_child = child.get_next_sibling()
            self.content.remove(child)
            child = next_child

    def _render(self, loading, error_message, character, transformations) -> bool:
        self._clear()

        if loading:
            self.content.append(
                Gtk.Label(label=f"Looking for Dragon Ball character #{self.character_id}...")
            )
            return False

        if error_message or character is None:
            message = Gtk.Label(label=error_message or "Character not found.")
            message.add_css_class("title-4")
            self.content.append(message)
            return False

        self.set_title(character.name)

        name = Gtk.Label(label=character.name)
        name.add_css_class("title-1")
        self.content.append(name)

        race = Gtk.Label(label=character.race)
        race.add_css_class("dim-label")
        self.content.append(race)

        self._append_section("Information")
        self._append_info("Gender", character.gender)
        self._append_info("Base Ki", format_ki(character.ki))
        self._append_info("Max Ki", format_ki(character.max_ki))
        self._append_info("Affiliation", character.affiliation)

        self._append_section("Description")
        description = Gtk.Label(label=character.description)
        description.set_wrap(True)
        description.set_xalign(0)
        self.content.append(description)

        if transformations:
            self._append_section(f"Transformations ({len(transformations)})")
            for transformation in transformations:
                row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
                title = Gtk.Label(label=transformation.name)
                title.set_hexpand(True)
                title.set_halign(Gtk.Align.START)
                row.append(title)
                row.append(Gtk.Label(label=f"Ki: {format_ki(transformation.ki)}"))
                self.content.append(row)

        return False

    def _append_section(self, title: str) -> None:
        label = Gtk.Label(label=title)
        label.set_halign(Gtk.Align.START)
        label.set_margin_top(12)
        label.add_css_class("title-3")
        self.content.append(label)

    def _append_info(self, label: str, value: str) -> None:
        row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
        key = Gtk.Label(label=f"{label}:")
        key.add_css_class("dim-label")
        row.append(key)
        row.append(Gtk.Label(label=value or "-"))
        self.content.append(row)

    def _on_close_request(self, window) -> bool:
        self.runner.call_soon(self.detail_manager.dispose)
        return False
