"""CSS loading service."""

import logging
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, Gtk

logger = logging.getLogger("CharBrowser.CssLoader")


class CssLoader:
    def load(self, css_path: str) -> bool:
        if not css_path or not Path(css_path).exists():
            logger.debug(f"No stylesheet at {css_path}")
            return False

        try:
            provider = Gtk.CssProvider()
            provider.load_from_path(str(css_path))
            Gtk.StyleContext.add_provider_for_display(
                Gdk.Display.get_default(),
                provider,
                Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
            )
        except Exception as e:
            logger.warning(f"Could not load custom CSS: {e}")
            return False

        logger.info(f"Loaded custom CSS from {css_path}")
        return True
