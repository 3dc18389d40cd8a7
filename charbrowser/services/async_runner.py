"""Background asyncio loop for network-bound managers."""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional

logger = logging.getLogger("CharBrowser.AsyncLoopRunner")


class AsyncLoopRunner:
    """Runs one asyncio event loop in a daemon thread.

    Managers that live on this loop are only ever touched from its thread;
    GTK code hands work over with ``submit`` and ``call_soon``.
    """

    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    @property
    def loop(self) -> Optional[asyncio.AbstractEventLoop]:
        return self._loop

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running():
            return
        self._ready.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()
        self._ready.wait(timeout=5)

    def _run_loop(self) -> None:
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)
        self._ready.set()
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()
            logger.debug("Event loop closed")

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Future:
        """Schedule ``coro`` on the loop and return its concurrent future."""
        if self._loop is None or not self.is_running():
            coro.close()
            raise RuntimeError("AsyncLoopRunner is not running")
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        future.add_done_callback(self._log_failure)
        return future

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        if self._loop is None or not self.is_running():
            raise RuntimeError("AsyncLoopRunner is not running")
        self._loop.call_soon_threadsafe(callback, *args)

    def stop(self) -> None:
        if self._loop is not None and self.is_running():
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=1)
        self._thread = None
        self._loop = None

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error(f"Background task failed: {error}")
