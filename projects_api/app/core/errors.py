"""
Errors raised by the data-access layer.

Only two kinds of failure exist: reading from the store and writing to
it.  Both carry the fixed message returned to API clients; the
underlying driver exception is chained as ``__cause__`` and logged by
the service, never exposed over HTTP.
"""


class StoreError(Exception):
    """Base class for document store failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StoreReadError(StoreError):
    """The store could not be queried or its results could not be decoded."""


class StoreWriteError(StoreError):
    """The store rejected or failed a write."""
