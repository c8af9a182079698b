"""Rich/JSON output helpers.

Humans get Rich-rendered text (tables, styled status lines), machines get
the ServiceResult as JSON (--json), and --quiet reduces success output to
the bare size string or preset names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pagesize.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from pagesize.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode selected by the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    *settings* takes precedence over the *json_output* shorthand.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
