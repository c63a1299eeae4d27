"""Command: list field kinds and the formats they accept."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from hallctl.commands._base import HallCommand
from hallctl.domain.index import MESSAGE_INVALID_INDEX
from hallctl.domain.registry import constraint_messages
from hallctl.domain.types import FieldKind
from hallctl.output.renderers import render_fields

if TYPE_CHECKING:
    from hallctl.commands._context import AppContext


@click.command(
    cls=HallCommand,
    examples="""\
  hallctl fields
  hallctl --json fields""",
)
@click.pass_obj
def fields(app: AppContext) -> None:
    """Show every field kind with its accepted format."""
    messages: dict[str, str] = {FieldKind.INDEX.value: MESSAGE_INVALID_INDEX}
    messages.update({kind.value: msg for kind, msg in constraint_messages().items()})

    if app.settings.json_output:
        click.echo(json.dumps({"ok": True, "op": "fields", "data": messages}, indent=2))
        return
    if app.settings.quiet:
        click.echo("\n".join(messages))
        return
    out = app.output_settings
    click.echo(render_fields(messages, no_color=not out.color, width=out.width))
