"""CharacterRow - one character in the list."""

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")
from gi.repository import Gtk, Pango

from charbrowser.models import Character
from charbrowser.utils.formatting import format_ki, truncate_text
from charbrowser.utils.highlighting import highlight_prefix


class CharacterRow(Gtk.ListBoxRow):
    """Row displaying a character card."""

    def __init__(
        self,
        character: Character,
        search_query: str = "",
        item_height: int = 96,
        description_length: int = 120,
    ):
        super().__init__()
        self.character = character
        self.search_query = search_query

        self.set_activatable(True)
        self.set_size_request(-1, item_height)

        card = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        card.set_margin_start(12)
        card.set_margin_end(12)
        card.set_margin_top(8)
        card.set_margin_bottom(8)
        card.add_css_class("character-card")

        header = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)

        name_label = Gtk.Label()
        name_label.set_markup(highlight_prefix(character.name, search_query))
        name_label.set_halign(Gtk.Align.START)
        name_label.set_hexpand(True)
        name_label.add_css_class("character-name")
        header.append(name_label)

        race_label = Gtk.Label(label=character.race)
        race_label.add_css_class("dim-label")
        header.append(race_label)
        card.append(header)

        ki_label = Gtk.Label(label=f"Ki: {format_ki(character.ki)}")
        ki_label.set_halign(Gtk.Align.START)
        ki_label.add_css_class("character-ki")
        card.append(ki_label)

        if character.description:
            description = Gtk.Label(
                label=truncate_text(character.description, description_length)
            )
            description.set_halign(Gtk.Align.START)
            description.set_wrap(True)
            description.set_wrap_mode(Pango.WrapMode.WORD_CHAR)
            description.set_xalign(0)
            description.add_css_class("dim-label")
            card.append(description)

        self.set_child(card)
