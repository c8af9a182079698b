"""Preset commands: list, show, custom."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pagesize.commands._base import PageSizeCommand

if TYPE_CHECKING:
    from pagesize.commands._context import AppContext


@click.command(
    "list",
    cls=PageSizeCommand,
    examples="""\
  pagesize list
  pagesize --json list
  pagesize -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List built-in and configured page size presets."""
    app.emit(app.presets.list_presets())


@click.command(
    cls=PageSizeCommand,
    examples="""\
  pagesize show
  pagesize show us_letter
  pagesize show "ANSI tabloid"
  pagesize --json show iso-a4""",
)
@click.argument("name", required=False)
@click.pass_obj
def show(app: AppContext, name: str | None) -> None:
    """Show the dimensions of preset NAME (default: the configured default)."""
    app.emit(app.presets.resolve(name))


@click.command(
    cls=PageSizeCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  pagesize custom 14.8 10.5
  pagesize --json custom 30 20""",
)
@click.argument("height", type=float)
@click.argument("width", type=float)
@click.pass_obj
def custom(app: AppContext, height: float, width: float) -> None:
    """Show an ad-hoc page size of HEIGHT x WIDTH centimeters."""
    app.emit(app.presets.custom(height, width))
