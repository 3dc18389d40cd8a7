"""Exceptions raised by the character browser."""

from typing import Optional


class CharBrowserError(Exception):
    """Base class for character browser errors."""


class FetchFailedError(CharBrowserError):
    """The catalog could not be fetched.

    Covers transport, server and decoding failures alike; callers treat it as
    retryable. ``status_code`` is set when the server answered with an HTTP
    error status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404
