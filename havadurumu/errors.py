"""Exceptions raised by the weather client and history store."""


class HavaDurumuError(Exception):
    """Base class for application errors."""


class FetchError(HavaDurumuError):
    """The weather lookup failed: network error, non-2xx status or bad body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PersistenceError(HavaDurumuError):
    """Reading or writing the history slot failed."""
