"""FieldValue — base for immutable, validated string wrappers.

INVARIANT: A FieldValue's ``value`` always satisfies its class's format
rule. The pydantic validator calls the same predicate the parser uses,
so no construction path can produce a non-conforming instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, field_validator

from hallctl.domain.types import FieldKind


class FieldValue(BaseModel):
    """A trimmed user string that satisfies one field kind's format rule.

    Subclasses set ``kind`` and ``MESSAGE_CONSTRAINTS`` and implement
    :meth:`is_valid` by delegating to their module-level predicate.
    Instances compare and hash by (class, value).
    """

    model_config = {"frozen": True}

    kind: ClassVar[FieldKind]
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    value: str

    def __init__(self, value: str | None = None, /, **data: Any) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if *value* satisfies this kind's format rule."""
        raise NotImplementedError

    @field_validator("value")
    @classmethod
    def _check_format(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy, re-running the format rule when *update* is given."""
        if not update:
            return super().model_copy(deep=deep)
        return self.model_validate({**self.model_dump(), **update})

    def __str__(self) -> str:
        return self.value
