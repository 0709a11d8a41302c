"""Exceptions raised by copreader."""

from __future__ import annotations


class CopreaderError(Exception):
    """Base class for copreader errors."""


class TransportError(CopreaderError):
    """The remote document could not be fetched.

    Attributes:
        doc_id: Identifier of the remote document.
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(
        self, message: str, doc_id: str = "", status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.doc_id = doc_id
        self.status_code = status_code
