"""Exception hierarchy for search, decoding, and rendering failures."""

from __future__ import annotations


class ScryfallError(Exception):
    """Base class for every error raised by this package."""


class TransportError(ScryfallError):
    """A page request failed at the network or HTTP layer."""

    def __init__(self, message: str, *, uri: str, status_code: int | None = None):
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code


class DecodeError(ScryfallError, ValueError):
    """A response body could not be decoded into the data model.

    Subclasses ``ValueError`` so pydantic validators can raise it directly.
    """


class InvariantViolation(ScryfallError, ValueError):
    """A multi-face layout tag arrived without any card faces."""
