"""Field kinds accepted from the command line."""

from __future__ import annotations

from enum import StrEnum


class FieldKind(StrEnum):
    """Categories of user-supplied values, one format rule each."""

    NAME = "name"
    PHONE = "phone"
    ADDRESS = "address"
    EMAIL = "email"
    MATRICULATION_NUMBER = "matriculation_number"
    GENDER = "gender"
    BLOCK = "block"
    ROOM = "room"
    STUDENT_GROUP = "student_group"
    INDEX = "index"
