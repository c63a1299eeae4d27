"""ParseResult and ParseFailure — the parser return contract.

INVARIANT: Every parse_* function returns a ParseResult. A format failure
is a value (``ok=False``), never an exception. Contract violations such as
passing ``None`` still raise ``TypeError``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from hallctl.domain.index import Index
from hallctl.domain.values import FieldValue
from hallctl.parsing.errors import InvalidFormatError

T = TypeVar("T")

INVALID_FORMAT = "INVALID_FORMAT"


class ParseFailure(BaseModel):
    """Why a raw token was rejected."""

    model_config = {"frozen": True}

    code: str = INVALID_FORMAT
    field: str
    message: str


class ParseResult(BaseModel, Generic[T]):
    """Outcome of parsing one raw token (or one batch of tokens).

    Attributes:
        ok: Whether the token matched its field's format.
        field: Field kind that was parsed (e.g. ``"phone"``).
        value: The validated value on success, else None.
        error: The failure on rejection, else None.
    """

    model_config = {"frozen": True}

    ok: bool
    field: str
    value: T | None = None
    error: ParseFailure | None = None

    @classmethod
    def success(cls, field: str, value: T) -> ParseResult[T]:
        return cls(ok=True, field=str(field), value=value)

    @classmethod
    def failure(cls, field: str, message: str) -> ParseResult[T]:
        return cls(
            ok=False,
            field=str(field),
            error=ParseFailure(field=str(field), message=message),
        )

    @property
    def op(self) -> str:
        """Operation name used by the output layer, e.g. ``parse_phone``."""
        return f"parse_{self.field}"

    def unwrap(self) -> T:
        """Return the parsed value, or raise :class:`InvalidFormatError`."""
        if not self.ok:
            message = self.error.message if self.error else ""
            raise InvalidFormatError(message, field=self.field)
        return self.value  # type: ignore[return-value]

    def to_data(self) -> dict[str, Any]:
        """JSON-friendly payload for the parsed value (empty on failure)."""
        if not self.ok:
            return {}
        return _describe(self.value)


def _describe(value: Any) -> dict[str, Any]:
    if isinstance(value, Index):
        return {"one_based": value.one_based, "zero_based": value.zero_based}
    if isinstance(value, FieldValue):
        return {"value": value.value}
    if isinstance(value, frozenset | set):
        members = sorted(str(v) for v in value)
        return {"values": members, "count": len(members)}
    return {"value": str(value)}
