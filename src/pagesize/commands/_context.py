"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pagesize.config.logging import configure_logging
from pagesize.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pagesize.config.settings import PageSizeSettings
    from pagesize.services.presets import PresetService
    from pagesize.services.result import ServiceResult


class AppContext:
    """State shared by every command of one CLI invocation."""

    def __init__(self, settings: PageSizeSettings) -> None:
        self.settings = settings
        self._presets: PresetService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def presets(self) -> PresetService:
        """The preset service (created on first access)."""
        if self._presets is None:
            from pagesize.services.presets import PresetService

            self._presets = PresetService(self.settings)
        return self._presets

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they
          don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON payload already carries the warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
