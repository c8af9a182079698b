"""Root ``pagesize`` command group."""

from __future__ import annotations

import click

from pagesize import __version__
from pagesize.commands import register_commands
from pagesize.commands._context import AppContext
from pagesize.config.settings import PageSizeSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="pagesize")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the size or preset names.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error details.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this pagesize.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Page sizes and paper presets for print output."""
    ctx.obj = AppContext(PageSizeSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
