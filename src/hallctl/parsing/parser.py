"""Parsers for raw command-line tokens.

Every external string passes through one of these functions before it
reaches the rest of the system. Each parser trims the token, asks the
field's own predicate whether it conforms, and returns a ParseResult
holding either the value object or the field's fixed constraint message.

Parsers are pure: no shared state, no I/O beyond debug logging, and the
same input always yields an equal result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from hallctl.domain.groups import StudentGroup
from hallctl.domain.index import MESSAGE_INVALID_INDEX, Index, is_non_zero_unsigned_integer
from hallctl.domain.person import (
    Address,
    Block,
    Email,
    Gender,
    MatriculationNumber,
    Name,
    Phone,
    Room,
)
from hallctl.domain.types import FieldKind
from hallctl.domain.values import FieldValue
from hallctl.parsing.result import ParseResult

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=FieldValue)


def _require_str(raw: Any, what: str) -> str:
    if not isinstance(raw, str):
        msg = f"{what} must be a str, got {type(raw).__name__}"
        raise TypeError(msg)
    return raw


def _reject(kind: FieldKind, message: str, raw: str) -> ParseResult[Any]:
    # Raw input is untrusted; log its size only.
    logger.debug("Rejected %s token (length=%d)", kind.value, len(raw))
    return ParseResult.failure(kind, message)


def _parse_field(cls: type[V], raw: str) -> ParseResult[V]:
    """Trim → validate → construct, shared by every string field."""
    _require_str(raw, cls.kind.value)
    trimmed = raw.strip()
    if not cls.is_valid(trimmed):
        return _reject(cls.kind, cls.MESSAGE_CONSTRAINTS, raw)
    return ParseResult.success(cls.kind, cls(trimmed))


def parse_index(raw: str) -> ParseResult[Index]:
    """Parse a one-based position such as ``"3"`` into an :class:`Index`.

    Leading and trailing whitespace is trimmed. Leading zeros are allowed
    (``"007"`` is 7); zero, signs, decimals, and values beyond the index
    range fail with :data:`MESSAGE_INVALID_INDEX`.
    """
    _require_str(raw, "index")
    trimmed = raw.strip()
    if not is_non_zero_unsigned_integer(trimmed):
        return _reject(FieldKind.INDEX, MESSAGE_INVALID_INDEX, raw)
    return ParseResult.success(FieldKind.INDEX, Index.from_one_based(int(trimmed.lstrip("0"))))


def parse_name(raw: str) -> ParseResult[Name]:
    """Parse a resident name. Leading and trailing whitespace is trimmed."""
    return _parse_field(Name, raw)


def parse_phone(raw: str) -> ParseResult[Phone]:
    """Parse a phone number. Leading and trailing whitespace is trimmed."""
    return _parse_field(Phone, raw)


def parse_address(raw: str) -> ParseResult[Address]:
    """Parse an address. Leading and trailing whitespace is trimmed."""
    return _parse_field(Address, raw)


def parse_email(raw: str) -> ParseResult[Email]:
    """Parse an email address. Leading and trailing whitespace is trimmed."""
    return _parse_field(Email, raw)


def parse_matriculation_number(raw: str) -> ParseResult[MatriculationNumber]:
    return _parse_field(MatriculationNumber, raw)


def parse_gender(raw: str) -> ParseResult[Gender]:
    return _parse_field(Gender, raw)


def parse_block(raw: str) -> ParseResult[Block]:
    return _parse_field(Block, raw)


def parse_room(raw: str) -> ParseResult[Room]:
    return _parse_field(Room, raw)


def parse_student_group(raw: str) -> ParseResult[StudentGroup]:
    """Parse a single student group name. Leading and trailing whitespace is trimmed."""
    return _parse_field(StudentGroup, raw)


def parse_student_groups(raws: Iterable[str]) -> ParseResult[frozenset[StudentGroup]]:
    """Parse many student group names into a set.

    Tokens are checked in the given order and the first invalid one
    determines the failure; later tokens are not examined. Tokens that
    trim to the same name collapse into one member. An empty input
    yields an empty set.
    """
    if raws is None or isinstance(raws, str):
        msg = f"student groups must be an iterable of str, got {type(raws).__name__}"
        raise TypeError(msg)

    groups: set[StudentGroup] = set()
    for raw in raws:
        result = parse_student_group(raw)
        if result.error is not None:
            return ParseResult.failure(FieldKind.STUDENT_GROUP, result.error.message)
        groups.add(result.unwrap())
    return ParseResult.success(FieldKind.STUDENT_GROUP, frozenset(groups))


parse_groups = parse_student_groups


PARSERS: dict[FieldKind, Callable[[str], ParseResult[Any]]] = {
    FieldKind.INDEX: parse_index,
    FieldKind.NAME: parse_name,
    FieldKind.PHONE: parse_phone,
    FieldKind.ADDRESS: parse_address,
    FieldKind.EMAIL: parse_email,
    FieldKind.MATRICULATION_NUMBER: parse_matriculation_number,
    FieldKind.GENDER: parse_gender,
    FieldKind.BLOCK: parse_block,
    FieldKind.ROOM: parse_room,
    FieldKind.STUDENT_GROUP: parse_student_group,
}


def parse_field(kind: FieldKind | str, raw: str) -> ParseResult[Any]:
    """Dispatch *raw* to the parser registered for *kind*.

    Raises:
        KeyError: If *kind* is not a known field kind.
    """
    try:
        parser = PARSERS[FieldKind(kind)]
    except ValueError:
        msg = f"No parser registered for kind={kind!r}"
        raise KeyError(msg) from None
    return parser(raw)
