"""Field registry — maps each FieldKind to its value object class."""

from __future__ import annotations

from hallctl.domain.groups import StudentGroup
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

FIELD_REGISTRY: dict[FieldKind, type[FieldValue]] = {
    cls.kind: cls
    for cls in (
        Name,
        Phone,
        Address,
        Email,
        MatriculationNumber,
        Gender,
        Block,
        Room,
        StudentGroup,
    )
}


def get_field_class(kind: FieldKind | str) -> type[FieldValue]:
    """Look up the value object class for *kind*.

    Raises:
        KeyError: If *kind* names no registered field (``index`` included,
            since indices are not string wrappers).
    """
    try:
        return FIELD_REGISTRY[FieldKind(kind)]
    except (ValueError, KeyError):
        msg = f"No field registered for kind={kind!r}"
        raise KeyError(msg) from None


def constraint_messages() -> dict[FieldKind, str]:
    """Constraint message per registered field kind, in registry order."""
    return {kind: cls.MESSAGE_CONSTRAINTS for kind, cls in FIELD_REGISTRY.items()}
