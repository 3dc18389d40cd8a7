#!/usr/bin/env python3
"""
Character Browser - GTK4 front-end for the Dragon Ball character catalog.
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

logger = logging.getLogger("CharBrowser.Main")


def main():
    """Entry point"""
    from charbrowser.core.di_container import AppContainer

    container = AppContainer.create()
    logging.basicConfig(
        level=getattr(logging, container.settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Character browser starting...")

    def signal_handler(sig, frame):
        logger.info("Shutting down UI...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    from charbrowser.application.browser_app import main as app_main

    return app_main(container)


if __name__ == "__main__":
    sys.exit(main())
