from __future__ import annotations


class ProverbsError(Exception):
    """Base class for errors raised by the proverbs package."""


class LoadError(ProverbsError):
    """The raw proverb collection could not be read or has the wrong shape."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
