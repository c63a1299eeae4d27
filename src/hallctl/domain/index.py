"""One-based list positions as typed by users.

Users address records by their displayed position (1, 2, 3, ...);
internally lists are zero-based. ``Index`` holds the one-based value and
converts on demand.

INVARIANT: ``1 <= one_based <= MAX_ONE_BASED``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import total_ordering
from typing import Any, Self

from pydantic import BaseModel, Field

MAX_ONE_BASED = 2**31 - 1

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_UNSIGNED_DIGITS = re.compile(r"[0-9]+")


def is_non_zero_unsigned_integer(text: str) -> bool:
    """Check whether *text* is an unsigned decimal integer in ``[1, MAX_ONE_BASED]``.

    Only ASCII digits are accepted; signs, decimal points, and embedded
    whitespace are rejected. Leading zeros are allowed as long as the
    value itself is non-zero.

    Examples:
        >>> is_non_zero_unsigned_integer("007")
        True
        >>> is_non_zero_unsigned_integer("+1")
        False
        >>> is_non_zero_unsigned_integer("2147483648")
        False
    """
    if _UNSIGNED_DIGITS.fullmatch(text) is None:
        return False
    # int() refuses very long digit strings, so bound the length first.
    significant = text.lstrip("0")
    if len(significant) > len(str(MAX_ONE_BASED)):
        return False
    return 1 <= int(significant or "0") <= MAX_ONE_BASED


@total_ordering
class Index(BaseModel):
    """A position in a displayed list, stored one-based."""

    model_config = {"frozen": True}

    one_based: int = Field(ge=1, le=MAX_ONE_BASED)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        return cls(one_based=one_based)

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        return cls(one_based=zero_based + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self.one_based < other.one_based

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy, re-checking the range when *update* is given."""
        if not update:
            return super().model_copy(deep=deep)
        return self.model_validate({**self.model_dump(), **update})

    def __str__(self) -> str:
        return str(self.one_based)
