"""Main character browser application."""

import logging
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gio, Gtk

from charbrowser.application.css_loader import CssLoader
from charbrowser.core.di_container import AppContainer
from charbrowser.services import AsyncLoopRunner
from charbrowser.windows.character_window import CharacterWindow

logger = logging.getLogger("CharBrowser.UI")


class BrowserApp(Gtk.Application):
    """Main application"""

    def __init__(self, container: AppContainer):
        super().__init__(
            application_id="org.charbrowser.CharacterBrowser",
            flags=Gio.ApplicationFlags.FLAGS_NONE,
        )
        self.container = container
        self.runner = AsyncLoopRunner()
        self.main_window: Optional[CharacterWindow] = None

    def do_startup(self):
        Gtk.Application.do_startup(self)
        CssLoader().load(str(self.container.paths.css_path))
        self.runner.start()

    def do_activate(self):
        if self.main_window is None:
            self.main_window = CharacterWindow(self, self.container, self.runner)
        self.main_window.present()

    def do_shutdown(self):
        logger.info("Shutting down...")
        if self.runner.is_running():
            try:
                self.runner.submit(self.container.aclose()).result(timeout=2)
            except Exception as e:
                logger.warning(f"Error closing HTTP client: {e}")
            self.runner.stop()
        Gtk.Application.do_shutdown(self)


def main(container: Optional[AppContainer] = None) -> int:
    app = BrowserApp(container or AppContainer.create())
    return app.run(None)
