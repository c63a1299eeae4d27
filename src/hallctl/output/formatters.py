"""Rich/JSON output helpers.

The CLI renders ParseResult for humans (Rich output) or machines
(--json). The formatter picks the mode from OutputSettings.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from hallctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from hallctl.parsing.result import ParseResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen once the CLI has resolved them."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int | None = None


def result_payload(result: ParseResult[Any]) -> dict[str, Any]:
    """The JSON shape of a ParseResult: ok, op, field, data, error."""
    return {
        "ok": result.ok,
        "op": result.op,
        "field": result.field,
        "data": result.to_data(),
        "error": result.error.model_dump() if result.error else None,
    }


def format_result(result: ParseResult[Any], *, settings: OutputSettings | None = None) -> str:
    """Format a ParseResult for display.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps(result_payload(result), indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        no_color=not settings.color,
        width=settings.width,
    )
