"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from hallctl.config.logging import configure_logging
from hallctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from hallctl.config.settings import HallSettings
    from hallctl.parsing.result import ParseResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: HallSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
            width=self.settings.output.width,
        )

    def emit(self, result: ParseResult[Any]) -> None:
        """Output a ParseResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
