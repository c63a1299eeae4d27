"""Errors raised by the parsing layer."""

from __future__ import annotations


class InvalidFormatError(ValueError):
    """A raw token does not match its field's format.

    Only raised by :meth:`ParseResult.unwrap`; parser functions report
    format failures as values.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
