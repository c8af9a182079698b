"""Subcommand modules for pagesize.

Provides register_commands() which uses deferred imports to keep
``pagesize --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pagesize.commands.presets import custom, list_cmd, show

    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(custom)
