"""Subcommand modules for hallctl.

Provides register_commands() which uses deferred imports to keep
``hallctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``parse`` group and the standalone ``fields`` command."""
    from hallctl.commands.fields import fields
    from hallctl.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(fields)
