"""Person field value objects and their format rules.

Each field kind owns exactly one predicate (``is_valid_<kind>``) and one
constraint message. Both the parser and the value object's own validator
consume the predicate, so "what the parser accepts" and "what the value
guarantees" cannot drift apart.

All rules are ASCII-only and apply to an already-trimmed string.
"""

from __future__ import annotations

import re
from typing import ClassVar

from hallctl.domain.types import FieldKind
from hallctl.domain.values import FieldValue

_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_LAST_LABEL = r"[A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]"

FIELD_PATTERNS: dict[FieldKind, re.Pattern[str]] = {
    FieldKind.NAME: re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*"),
    FieldKind.PHONE: re.compile(r"[0-9]{3,}"),
    FieldKind.ADDRESS: re.compile(r"\S.*"),
    FieldKind.EMAIL: re.compile(
        rf"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*@(?:{_LABEL}\.)+{_LAST_LABEL}"
    ),
    FieldKind.MATRICULATION_NUMBER: re.compile(r"A[0-9]{7}[A-Z]"),
    FieldKind.BLOCK: re.compile(r"[A-Z]"),
    FieldKind.ROOM: re.compile(r"[0-9]{1,2}-[0-9]{1,3}"),
}

GENDERS: frozenset[str] = frozenset({"M", "F"})


def _matches(kind: FieldKind, value: str) -> bool:
    return FIELD_PATTERNS[kind].fullmatch(value) is not None


def is_valid_name(value: str) -> bool:
    return _matches(FieldKind.NAME, value)


def is_valid_phone(value: str) -> bool:
    return _matches(FieldKind.PHONE, value)


def is_valid_address(value: str) -> bool:
    return _matches(FieldKind.ADDRESS, value)


def is_valid_email(value: str) -> bool:
    """Check ``local-part@domain`` where the domain has at least two labels."""
    return _matches(FieldKind.EMAIL, value)


def is_valid_matriculation_number(value: str) -> bool:
    return _matches(FieldKind.MATRICULATION_NUMBER, value)


def is_valid_gender(value: str) -> bool:
    return value in GENDERS


def is_valid_block(value: str) -> bool:
    return _matches(FieldKind.BLOCK, value)


def is_valid_room(value: str) -> bool:
    return _matches(FieldKind.ROOM, value)


class Name(FieldValue):
    """A resident's full name."""

    kind: ClassVar[FieldKind] = FieldKind.NAME
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_name(value)


class Phone(FieldValue):
    kind: ClassVar[FieldKind] = FieldKind.PHONE
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_phone(value)


class Address(FieldValue):
    kind: ClassVar[FieldKind] = FieldKind.ADDRESS
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_address(value)


class Email(FieldValue):
    """An email address of the form ``local-part@domain``."""

    kind: ClassVar[FieldKind] = FieldKind.EMAIL
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters, and special characters may not be adjacent.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "at least two domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_email(value)


class MatriculationNumber(FieldValue):
    """A student matriculation number, e.g. ``A0123456X``."""

    kind: ClassVar[FieldKind] = FieldKind.MATRICULATION_NUMBER
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Matriculation numbers should start with 'A', followed by 7 digits "
        "and end with an uppercase letter, e.g. A0123456X"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_matriculation_number(value)


class Gender(FieldValue):
    kind: ClassVar[FieldKind] = FieldKind.GENDER
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Gender should be either M or F"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_gender(value)


class Block(FieldValue):
    """The hall block a resident lives in."""

    kind: ClassVar[FieldKind] = FieldKind.BLOCK
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Blocks should be a single uppercase letter, e.g. A"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_block(value)


class Room(FieldValue):
    """A room within a block, written ``FLOOR-UNIT``."""

    kind: ClassVar[FieldKind] = FieldKind.ROOM
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Rooms should be of the format FLOOR-UNIT, e.g. 3-12 or 10-105"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_room(value)
