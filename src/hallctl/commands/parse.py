"""Command group: parse raw tokens into validated field values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hallctl.commands._base import HallGroup
from hallctl.domain.types import FieldKind
from hallctl.parsing.parser import parse_field, parse_student_groups

if TYPE_CHECKING:
    from hallctl.commands._context import AppContext

_FIELD_EXAMPLES: dict[FieldKind, str] = {
    FieldKind.INDEX: "3",
    FieldKind.NAME: "'Alex Yeoh'",
    FieldKind.PHONE: "87438807",
    FieldKind.ADDRESS: "'Blk 30 Geylang Street 29, #06-40'",
    FieldKind.EMAIL: "alexyeoh@example.com",
    FieldKind.MATRICULATION_NUMBER: "A0123456X",
    FieldKind.GENDER: "M",
    FieldKind.BLOCK: "E",
    FieldKind.ROOM: "10-105",
    FieldKind.STUDENT_GROUP: "cs2103",
}


def _command_name(kind: FieldKind) -> str:
    return kind.value.replace("_", "-")


@click.group(
    cls=HallGroup,
    examples="""\
  hallctl parse index 3
  hallctl parse phone ' 87438807 '
  hallctl --json parse email alexyeoh@example.com
  hallctl parse groups cs2103 choir cs2103""",
)
def parse() -> None:
    """Validate raw tokens against each field's format."""


def _register_field_command(kind: FieldKind) -> None:
    name = _command_name(kind)

    @parse.command(
        name=name,
        examples=f"  hallctl parse {name} {_FIELD_EXAMPLES[kind]}",
        help=f"Parse one {kind.value.replace('_', ' ')} token.",
    )
    @click.argument("raw")
    @click.pass_obj
    def _command(app: AppContext, raw: str) -> None:
        app.emit(parse_field(kind, raw))


for _kind in FieldKind:
    _register_field_command(_kind)


@parse.command(
    examples="""\
  hallctl parse groups cs2103 choir
  hallctl -q parse groups cs2103 cs2103""",
)
@click.argument("raws", nargs=-1)
@click.pass_obj
def groups(app: AppContext, raws: tuple[str, ...]) -> None:
    """Parse student group names into a de-duplicated set.

    Stops at the first invalid name.
    """
    app.emit(parse_student_groups(raws))
