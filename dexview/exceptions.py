"""
dexview/exceptions.py – Error hierarchy for fetching catalog data.

All errors derive from DexViewError so callers can catch broadly or
specifically depending on context.
"""

from typing import Optional


class DexViewError(Exception):
    """Base class for all Dex Viewer exceptions."""


class NetworkError(DexViewError):
    """Raised when a request cannot be sent or its response cannot be parsed."""


# The detail view reports any non-404 failure under this name.
FetchError = NetworkError


class MalformedDataError(NetworkError):
    """Raised when a response parses as JSON but has an unexpected shape."""


class NotFoundError(DexViewError):
    """
    Raised when the API answers a record lookup with a non-success status.

    Attributes
    ----------
    status_code : HTTP status returned by the API, if known.
    """

    def __init__(self, message: str = "Pokémon not found", status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
