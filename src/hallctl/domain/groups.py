"""Student group (tag) value object."""

from __future__ import annotations

import re
from typing import ClassVar

from hallctl.domain.types import FieldKind
from hallctl.domain.values import FieldValue

GROUP_PATTERN = re.compile(r"[A-Za-z0-9]+")


def is_valid_student_group_name(value: str) -> bool:
    """Group names are one or more ASCII alphanumerics, no spaces.

    Examples:
        >>> is_valid_student_group_name("cs2103")
        True
        >>> is_valid_student_group_name("cs 2103")
        False
    """
    return GROUP_PATTERN.fullmatch(value) is not None


class StudentGroup(FieldValue):
    """A named group a resident belongs to (CCA, module, floor, ...)."""

    kind: ClassVar[FieldKind] = FieldKind.STUDENT_GROUP
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Student group names should be alphanumeric"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return is_valid_student_group_name(value)
